"""
Unit tests for the receipt store backends.
"""
import threading

import pytest

from app.config import Settings
from app.receipts.errors import ReceiptNotFoundError
from app.receipts.store import (
    InMemoryReceiptStore,
    SqlReceiptStore,
    build_store,
    new_receipt_id,
)

from tests.conftest import TARGET_RECEIPT, make_receipt


class TestInMemoryStore:
    def test_put_returns_generated_id(self, store):
        assert store.put(make_receipt()) == "receipt-1"
        assert store.put(make_receipt()) == "receipt-2"

    def test_get_returns_stored_receipt(self, store):
        receipt = make_receipt(**TARGET_RECEIPT)
        rid = store.put(receipt)
        assert store.get(rid) == receipt

    def test_get_unknown_raises(self, store):
        with pytest.raises(ReceiptNotFoundError) as exc_info:
            store.get("nonexistent")
        assert exc_info.value.receipt_id == "nonexistent"

    def test_default_ids_are_uuids(self):
        s = InMemoryReceiptStore()
        rid = s.put(make_receipt())
        assert len(rid) == 36
        assert rid.count("-") == 4

    def test_concurrent_puts(self):
        s = InMemoryReceiptStore()
        receipt = make_receipt()
        ids: list[str] = []
        ids_lock = threading.Lock()

        def worker():
            for _ in range(50):
                rid = s.put(receipt)
                with ids_lock:
                    ids.append(rid)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(ids)) == 400
        assert len(s) == 400
        for rid in ids:
            assert s.get(rid) == receipt


class TestSqlStore:
    @pytest.fixture()
    def sql_store(self):
        return build_store(Settings(STORE_BACKEND="sql", DATABASE_URL="sqlite:///:memory:"))

    def test_round_trip(self, sql_store):
        receipt = make_receipt(**TARGET_RECEIPT)
        rid = sql_store.put(receipt)
        assert sql_store.get(rid) == receipt

    def test_purchase_time_survives_round_trip(self, sql_store):
        rid = sql_store.put(make_receipt(purchaseTime="14:33"))
        assert sql_store.get(rid).purchase_time.strftime("%H:%M") == "14:33"

    def test_get_unknown_raises(self, sql_store):
        with pytest.raises(ReceiptNotFoundError):
            sql_store.get("nonexistent")

    def test_is_sql_backend(self, sql_store):
        assert isinstance(sql_store, SqlReceiptStore)


class TestBuildStore:
    def test_memory(self):
        assert isinstance(build_store(Settings(STORE_BACKEND="memory")), InMemoryReceiptStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_store(Settings(STORE_BACKEND="redis"))


def test_new_receipt_id_unique():
    assert len({new_receipt_id() for _ in range(100)}) == 100
