"""
Tests for the snapshot store and the ETL loaders that fill it
"""
import pytest

from api import crud
from api.backend_client import BackendClient
from conftest import FakeResponse, FakeSession
from etl import backend_sync, seed_ingest


class TestCrud:

    def test_upsert_keeps_first_insertion_order(self, db):
        crud.upsert_snapshot(db, {"id": "b", "name": "B"})
        crud.upsert_snapshot(db, {"id": "a", "name": "A"})
        crud.upsert_snapshot(db, {"id": "b", "name": "B2"})
        assert [r["name"] for r in crud.list_records(db)] == ["B2", "A"]

    def test_upsert_preserves_wishlist_unless_given(self, db):
        crud.upsert_snapshot(db, {"id": "x", "wishlist": True})
        crud.upsert_snapshot(db, {"id": "x", "name": "no flag"})
        assert crud.get_record(db, "x")["wishlist"] is True
        crud.upsert_snapshot(db, {"id": "x", "wishlist": False})
        assert crud.get_record(db, "x")["wishlist"] is False

    def test_upsert_requires_id(self, db):
        with pytest.raises(ValueError):
            crud.upsert_snapshot(db, {"name": "anonymous"})

    def test_set_wishlist_unknown_id(self, db):
        assert crud.set_wishlist(db, "missing", True) is None

    def test_uncommitted_batch_rolls_back(self, db):
        crud.upsert_snapshot(db, {"id": "kept"})
        crud.delete_all(db, commit=False)
        crud.upsert_snapshot(db, {"id": "a"}, commit=False)
        crud.upsert_snapshot(db, {"id": "a", "name": "again"}, commit=False)
        assert [r["id"] for r in crud.list_records(db)] == ["a"]
        db.rollback()
        assert [r["id"] for r in crud.list_records(db)] == ["kept"]

    def test_delete_all(self, db):
        crud.upsert_snapshot(db, {"id": "1"})
        crud.upsert_snapshot(db, {"id": "2"})
        assert crud.delete_all(db) == 2
        assert crud.list_records(db) == []


class TestSeedIngest:

    def test_loads_yaml_records(self, db, tmp_path):
        seed = tmp_path / "seed.yaml"
        seed.write_text(
            "influencers:\n"
            "  - id: s1\n"
            "    name: Seeded One\n"
            "    niche: {name: Travel}\n"
            "  - id: s2\n"
            "    name: Seeded Two\n"
        )
        assert seed_ingest.main(str(seed)) == 2
        assert [r["id"] for r in crud.list_records(db)] == ["s1", "s2"]
        assert crud.get_record(db, "s1")["niche"] == {"name": "Travel"}

    def test_bad_record_leaves_store_untouched(self, db, tmp_path):
        crud.upsert_snapshot(db, {"id": "old"})
        seed = tmp_path / "seed.yaml"
        seed.write_text("influencers:\n  - id: a\n  - name: no id\n")
        with pytest.raises(ValueError):
            seed_ingest.main(str(seed), reset=True)
        assert [r["id"] for r in crud.list_records(db)] == ["old"]

    def test_reset_clears_existing(self, db, tmp_path):
        crud.upsert_snapshot(db, {"id": "old"})
        seed = tmp_path / "seed.yaml"
        seed.write_text("influencers:\n  - id: new\n")
        seed_ingest.main(str(seed), reset=True)
        assert [r["id"] for r in crud.list_records(db)] == ["new"]

    def test_rejects_non_list(self, tmp_path):
        seed = tmp_path / "seed.yaml"
        seed.write_text("influencers: {id: 1}\n")
        with pytest.raises(ValueError):
            seed_ingest.load_seed(str(seed))


class TestBackendSync:

    def test_sync_upserts_records_with_ids(self, db):
        session = FakeSession({"GET /influencers": FakeResponse(200, [
            {"id": "1", "name": "One"},
            {"name": "no id"},
            "garbage",
            {"id": 2, "name": "Two"},
        ])})
        client = BackendClient(session=session, retry_delay=0)
        assert backend_sync.sync_to_db(client) == 2
        assert [r["id"] for r in crud.list_records(db)] == ["1", 2]
