"""
File-backed data access for the catalog.

Every call re-reads the document it needs from disk and decodes it into a
typed record; nothing is cached between calls. Failures surface as
CatalogError subclasses whose `kind` tells the caller whether the client or
the server is at fault.

Submissions are appended by rewriting the whole `cust_serv.json` document
through a temp file swapped in with os.replace.
There is no locking: two concurrent submissions can race and the last write
wins.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TypeVar

import pydantic

from backend.corpus import StoreConfig
from models import FaqList, FormSubmission, Product, ProductList, PromoList, SubmissionLog

from .errors import NotFoundError, StorageReadError, StorageWriteError, ValidationError

logger = logging.getLogger(__name__)

_DocumentT = TypeVar("_DocumentT", bound=pydantic.BaseModel)


def _decode(path: Path, raw: bytes, model: type[_DocumentT]) -> _DocumentT:
    try:
        return model.model_validate_json(raw)
    except (pydantic.ValidationError, UnicodeDecodeError) as exc:
        logger.error("Malformed document %s: %s", path, exc)
        raise StorageReadError(str(path)) from exc


def _load_document(path: Path, model: type[_DocumentT]) -> _DocumentT:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        logger.error("Failed to read %s: %s", path, exc)
        raise StorageReadError(str(path)) from exc
    return _decode(path, raw, model)


class CatalogStore:
    """Read/filter/append operations over the JSON documents in one data directory."""

    def __init__(self, config: StoreConfig | None = None) -> None:
        self.config = config or StoreConfig.from_env()

    # ------------------------------------------------------------------
    # Read-only documents
    # ------------------------------------------------------------------

    def list_products(self) -> ProductList:
        return _load_document(self.config.products_path, ProductList)

    def filter_by_category(self, category: str) -> ProductList:
        """Products in `category` (case-insensitive); NotFoundError if there are none."""
        matches = self.list_products().matching_category(category)
        if not matches:
            raise NotFoundError.category(category)
        return ProductList(products=matches)

    def get_by_id(self, product_id: str) -> Product:
        product = self.list_products().first_with_id(product_id)
        if product is None:
            raise NotFoundError.product(product_id)
        return product

    def list_faqs(self) -> FaqList:
        return _load_document(self.config.faqs_path, FaqList)

    def list_promos(self) -> PromoList:
        return _load_document(self.config.promos_path, PromoList)

    # ------------------------------------------------------------------
    # Form submissions
    # ------------------------------------------------------------------

    def submit_feedback(
        self,
        name: str | None,
        email: str | None,
        feedback: str | None,
        phone: str | None = None,
    ) -> str:
        """
        Append one contact-form submission and return the confirmation text.

        The submissions file is only touched once name, email, and feedback
        are all present. A missing file starts a fresh log; any other read
        failure aborts without writing.
        """
        if not (name and email and feedback):
            raise ValidationError()

        submission = FormSubmission(name=name, email=email, feedback=feedback, phone=phone or "")
        path = self.config.submissions_path

        log = self._load_submissions(path)
        log.append(submission)
        self._write_submissions(path, log)

        logger.info("Stored feedback from %s (%d total)", name, len(log.form_submissions))
        return f"Request to add {name}'s feedback successfully received!"

    def _load_submissions(self, path: Path) -> SubmissionLog:
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            logger.info("No submissions at %s yet; starting a new log", path)
            return SubmissionLog()
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise StorageReadError(str(path)) from exc
        return _decode(path, raw, SubmissionLog)

    def _write_submissions(self, path: Path, log: SubmissionLog) -> None:
        """Replace the document in one step; a failed write leaves the previous file intact."""
        payload = log.model_dump_json(indent=2) + "\n"
        tmp_path: Path | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.error("Failed to write %s: %s", path, exc)
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageWriteError(str(path)) from exc
