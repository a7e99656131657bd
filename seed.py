"""
Seed script: writes the sample read-only catalog documents
(all_prods.json, faqs.json, promos.json) into the data directory.

Existing files are left alone unless --force is given. The submissions
document is never touched; the service creates it on the first POST /info.

Usage:
    uv run python seed.py [--force]
"""

import logging
import sys
from pathlib import Path

from pydantic import BaseModel

from backend.corpus import FAQS_FILE, PRODUCTS_FILE, PROMOS_FILE, StoreConfig
from models import Faq, FaqList, Product, ProductList, Promo, PromoList

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = ProductList(
    products=[
        Product(
            image="img/cordless-drill.jpg",
            name="20V Cordless Drill",
            price="$129.00",
            category="Tools",
            id="T100",
            description="Compact drill/driver with two-speed gearbox and LED work light.",
        ),
        Product(
            image="img/claw-hammer.jpg",
            name="16 oz Claw Hammer",
            price="$19.99",
            category="Tools",
            id="T200",
            description="Fiberglass handle with anti-vibration grip.",
        ),
        Product(
            image="img/desk-lamp.jpg",
            name="Pilar Desk Lamp",
            price="$89.00",
            category="Lighting",
            id="L100",
            description="Dimmable LED lamp with a weighted brass base.",
        ),
        Product(
            image="img/trousers.jpg",
            name="Miller Trousers",
            price="$145.00",
            category="Apparel",
            id="A100",
            description="Relaxed fit wool-blend trousers.",
        ),
    ]
)

SAMPLE_FAQS = FaqList(
    faqs=[
        Faq(
            question="How long does shipping take?",
            answer="Orders ship within two business days and arrive in three to five.",
        ),
        Faq(
            question="Can I return an item?",
            answer="Unused items can be returned within 30 days of delivery.",
        ),
        Faq(
            question="How do I contact support?",
            answer="Use the contact form and we will reply by email.",
        ),
    ]
)

SAMPLE_PROMOS = PromoList(
    promos=[
        Promo(
            start_date="2026-11-25",
            end_date="2026-12-01",
            sale_description="20% off all tools for the holiday weekend.",
        ),
        Promo(
            start_date="2027-01-02",
            end_date="2027-01-15",
            sale_description="Free shipping on lighting orders over $50.",
        ),
    ]
)

SAMPLE_DOCUMENTS: dict[str, BaseModel] = {
    PRODUCTS_FILE: SAMPLE_PRODUCTS,
    FAQS_FILE: SAMPLE_FAQS,
    PROMOS_FILE: SAMPLE_PROMOS,
}


def _write_document(path: Path, document: BaseModel) -> None:
    path.write_text(document.model_dump_json(indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %s", path.name)


def seed_all(data_dir: Path, force: bool = False) -> list[Path]:
    """Write every sample document missing from data_dir (all of them if force). Returns paths written."""
    data_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for filename, document in SAMPLE_DOCUMENTS.items():
        path = data_dir / filename
        if path.exists() and not force:
            logger.info("Skipping %s (already exists)", path.name)
            continue
        _write_document(path, document)
        written.append(path)

    logger.info("Seeded %d/%d documents into %s.", len(written), len(SAMPLE_DOCUMENTS), data_dir)
    return written


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    seed_all(StoreConfig.from_env().data_dir, force="--force" in sys.argv[1:])
