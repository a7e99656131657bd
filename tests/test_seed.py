import tempfile
import unittest
from pathlib import Path

from backend.corpus import StoreConfig
from backend.store import CatalogStore
from seed import SAMPLE_DOCUMENTS, seed_all


class TestSeed(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name) / "product_info"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_seeded_documents_are_readable_by_the_store(self) -> None:
        written = seed_all(self.data_dir)

        self.assertEqual(sorted(p.name for p in written), sorted(SAMPLE_DOCUMENTS))
        store = CatalogStore(StoreConfig(data_dir=self.data_dir))
        self.assertTrue(store.list_products().products)
        self.assertTrue(store.filter_by_category("tools").products)
        self.assertTrue(store.list_faqs().faqs)
        self.assertTrue(store.list_promos().promos)

    def test_does_not_create_submissions_log(self) -> None:
        seed_all(self.data_dir)
        self.assertFalse((self.data_dir / "cust_serv.json").exists())

    def test_existing_documents_are_kept_unless_forced(self) -> None:
        self.data_dir.mkdir()
        faqs = self.data_dir / "faqs.json"
        faqs.write_text('{"faqs": []}', encoding="utf-8")

        written = seed_all(self.data_dir)
        self.assertNotIn(faqs, written)
        self.assertEqual(faqs.read_text(encoding="utf-8"), '{"faqs": []}')

        written = seed_all(self.data_dir, force=True)
        self.assertIn(faqs, written)
        self.assertNotEqual(faqs.read_text(encoding="utf-8"), '{"faqs": []}')
