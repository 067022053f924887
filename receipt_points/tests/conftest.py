# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from receipt_points.main import app
from receipt_points.repository import ScoreStore, get_store
from receipt_points.schemas import Receipt

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

def make_receipt(**overrides) -> Receipt:
    """A receipt on which no rule fires; override fields to switch rules on."""
    data = {
        "retailer": "",
        "purchaseDate": "2022-01-02",
        "purchaseTime": "09:00",
        "items": [],
        "total": "1.13",
    }
    data.update(overrides)
    return Receipt.model_validate(data)

@pytest.fixture
def store():
    return ScoreStore()

@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()

@pytest.fixture
def receipt_factory():
    return make_receipt

@pytest.fixture
def target_receipt():
    return dict(TARGET_RECEIPT)

@pytest.fixture
def corner_market_receipt():
    return dict(CORNER_MARKET_RECEIPT)
