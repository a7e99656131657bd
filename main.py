"""
Run the catalog API under uvicorn.

Usage:
    uv run python main.py
"""

import logging
import os

import uvicorn

from backend.api import app

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8000


def _read_env_int(name: str, default: int) -> int:
    """Read env var as int; return default if unset or invalid."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    host = os.getenv("HOST", "0.0.0.0")
    port = _read_env_int("PORT", DEFAULT_PORT)
    logger.info("Listening on port %d...", port)
    uvicorn.run(app, host=host, port=port)
