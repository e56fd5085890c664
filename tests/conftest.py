"""
Shared pytest fixtures — in‑memory receipt store + FastAPI TestClient.
"""
import itertools

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.receipts.schemas import Receipt
from app.receipts.store import InMemoryReceiptStore, get_store

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}

SIMPLE_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-02",
    "purchaseTime": "13:13",
    "total": "1.25",
    "items": [{"shortDescription": "Pepsi - 12-oz", "price": "1.25"}],
}

TWO_ITEM_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-02",
    "purchaseTime": "13:13",
    "total": "2.65",
    "items": [
        {"shortDescription": "Pepsi - 12-oz", "price": "1.25"},
        {"shortDescription": "Dasani", "price": "1.40"},
    ],
}


def make_receipt(**overrides) -> Receipt:
    """Build a Receipt from the one-item fixture with camelCase overrides."""
    data = {**SIMPLE_RECEIPT, **overrides}
    return Receipt.model_validate(data)


@pytest.fixture()
def store():
    counter = itertools.count(1)
    return InMemoryReceiptStore(id_factory=lambda: f"receipt-{next(counter)}")


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
