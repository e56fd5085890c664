"""
Receipt store — identifier-keyed storage for submitted receipts.

Backends share the ``ReceiptStore`` interface so the HTTP layer and the
scoring engine never depend on where receipts live. Every backend holds its
lock only around the read/write itself.
"""
from __future__ import annotations

import abc
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request

from app.config import Settings
from app.receipts.errors import ReceiptNotFoundError
from app.receipts.schemas import Receipt

IdFactory = Callable[[], str]


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class ReceiptStore(metaclass=abc.ABCMeta):
    """Associates generated identifiers with immutable receipts."""

    def __init__(self, id_factory: IdFactory = new_receipt_id) -> None:
        self._id_factory = id_factory

    @abc.abstractmethod
    def put(self, receipt: Receipt) -> str:
        """Store ``receipt`` under a fresh identifier and return it."""

    @abc.abstractmethod
    def get(self, receipt_id: str) -> Receipt:
        """Return the receipt for ``receipt_id``.

        Raises ``ReceiptNotFoundError`` when nothing is stored under it.
        """


class InMemoryReceiptStore(ReceiptStore):
    """Dict-backed store guarded by a single lock."""

    def __init__(self, id_factory: IdFactory = new_receipt_id) -> None:
        super().__init__(id_factory)
        self._receipts: dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt: Receipt) -> str:
        receipt_id = self._id_factory()
        with self._lock:
            self._receipts[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)


class SqlReceiptStore(ReceiptStore):
    """SQLAlchemy-backed store; receipts are kept as JSON rows."""

    def __init__(self, session_factory, id_factory: IdFactory = new_receipt_id) -> None:
        super().__init__(id_factory)
        self._session_factory = session_factory
        # in-memory SQLite shares one connection across threads
        self._lock = threading.Lock()

    def put(self, receipt: Receipt) -> str:
        from app.receipts.models import ReceiptModel

        receipt_id = self._id_factory()
        record = ReceiptModel(
            id=receipt_id,
            created_at=datetime.now(timezone.utc).isoformat(),
            receipt_json=receipt.model_dump(mode="json", by_alias=True),
        )
        with self._lock:
            db = self._session_factory()
            try:
                db.add(record)
                db.commit()
            finally:
                db.close()
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        from app.receipts.models import ReceiptModel

        with self._lock:
            db = self._session_factory()
            try:
                row = db.query(ReceiptModel).filter(ReceiptModel.id == receipt_id).first()
                data = row.receipt_json if row else None
            finally:
                db.close()
        if data is None:
            raise ReceiptNotFoundError(receipt_id)
        return Receipt.model_validate(data)


def build_store(settings: Settings) -> ReceiptStore:
    """Create the store selected by ``settings.STORE_BACKEND``."""
    backend = settings.STORE_BACKEND
    if backend == "memory":
        return InMemoryReceiptStore()
    if backend == "sql":
        from app.receipts.database import create_session_factory

        return SqlReceiptStore(create_session_factory(settings.DATABASE_URL, echo=settings.DEBUG))
    raise ValueError(f"Unknown receipt store backend: {backend!r}")


def get_store(request: Request) -> ReceiptStore:
    """Receipt store dependency — the instance created at startup."""
    return request.app.state.receipt_store
