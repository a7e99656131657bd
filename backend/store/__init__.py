from .errors import (
    SERVER_ERROR,
    CatalogError,
    ErrorKind,
    NotFoundError,
    StorageReadError,
    StorageWriteError,
    ValidationError,
)
from .store import CatalogStore

__all__ = [
    "SERVER_ERROR",
    "CatalogError",
    "CatalogStore",
    "ErrorKind",
    "NotFoundError",
    "StorageReadError",
    "StorageWriteError",
    "ValidationError",
]
