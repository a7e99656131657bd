"""
Paths and file registry for the JSON-backed catalog.

Single source of truth for:
- ROOT_DIR         — repository root
- DEFAULT_DATA_DIR — directory holding the catalog documents
- *_FILE           — document names inside the data directory
- StoreConfig      — where the running service reads and writes
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
DEFAULT_DATA_DIR: Path = ROOT_DIR / "product_info"
DEFAULT_STATIC_DIR: Path = ROOT_DIR / "public"

# Read-only documents
PRODUCTS_FILE = "all_prods.json"
FAQS_FILE = "faqs.json"
PROMOS_FILE = "promos.json"

# Read-write, append-only at the document level
SUBMISSIONS_FILE = "cust_serv.json"


def _read_env_path(name: str, default: Path) -> Path:
    """Read env var as a path; return default if unset or blank."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class StoreConfig:
    """Data and static directories. Overridable via CATALOG_* env vars."""

    data_dir: Path = DEFAULT_DATA_DIR
    static_dir: Path = DEFAULT_STATIC_DIR

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Build config from CATALOG_* env vars, falling back to defaults."""
        return cls(
            data_dir=_read_env_path("CATALOG_DATA_DIR", DEFAULT_DATA_DIR),
            static_dir=_read_env_path("CATALOG_STATIC_DIR", DEFAULT_STATIC_DIR),
        )

    @property
    def products_path(self) -> Path:
        return self.data_dir / PRODUCTS_FILE

    @property
    def faqs_path(self) -> Path:
        return self.data_dir / FAQS_FILE

    @property
    def promos_path(self) -> Path:
        return self.data_dir / PROMOS_FILE

    @property
    def submissions_path(self) -> Path:
        return self.data_dir / SUBMISSIONS_FILE
