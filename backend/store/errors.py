from __future__ import annotations

from enum import Enum

SERVER_ERROR = "An error occured on the server. Try again later!"
MISSING_PARAMS_ERROR = "Did not include all POST parameters of name, email, and feedback!"


class ErrorKind(Enum):
    """Who is at fault for a failed store call; maps 1:1 to an HTTP status."""

    CLIENT = 400
    SERVER = 500

    @property
    def status_code(self) -> int:
        return self.value


class CatalogError(Exception):
    """
    Base for every failure raised by CatalogStore.

    Callers dispatch on `kind`, never on the subclass. `message` is safe to
    show to the client as-is.
    """

    kind: ErrorKind = ErrorKind.SERVER

    def __init__(self, message: str = SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Required form fields were missing or empty."""

    kind = ErrorKind.CLIENT

    def __init__(self, message: str = MISSING_PARAMS_ERROR) -> None:
        super().__init__(message)


class NotFoundError(CatalogError):
    """A category or product id lookup matched nothing."""

    kind = ErrorKind.CLIENT

    @classmethod
    def category(cls, category: str) -> "NotFoundError":
        return cls(f"Category {category} not found.")

    @classmethod
    def product(cls, product_id: str) -> "NotFoundError":
        return cls(f"Product ID {product_id} not found.")


class StorageReadError(CatalogError):
    """A document could not be read, parsed, or decoded."""

    def __init__(self, path: str) -> None:
        super().__init__(SERVER_ERROR)
        self.path = path


class StorageWriteError(CatalogError):
    """The submissions document could not be written back."""

    def __init__(self, path: str) -> None:
        super().__init__(SERVER_ERROR)
        self.path = path
