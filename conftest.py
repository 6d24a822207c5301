import pytest

from app import create_app
from models import Receipt


@pytest.fixture
def app():
    return create_app(config={'DEBUG': True, 'TESTING': True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def simple_receipt_skeleton():
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-02",
        "purchaseTime": "13:13",
        "total": "1.25",
        "items": [
            {"shortDescription": "Pepsi - 12-oz", "price": "1.25"}
        ]
    }


@pytest.fixture
def simple_receipt(simple_receipt_skeleton):
    return Receipt.from_json(simple_receipt_skeleton)
