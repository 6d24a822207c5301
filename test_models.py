import dataclasses

import pytest

from exceptions import ValidationError
from models import Item, Receipt, required_receipt_attributes


def test_from_json_builds_immutable_receipt(simple_receipt_skeleton):
    receipt = Receipt.from_json(simple_receipt_skeleton)
    assert receipt.retailer == "Target"
    assert receipt.items == (Item(shortDescription="Pepsi - 12-oz", price="1.25"),)
    with pytest.raises(dataclasses.FrozenInstanceError):
        receipt.total = "0.00"
    with pytest.raises(dataclasses.FrozenInstanceError):
        receipt.items[0].price = "0.00"


def test_from_json_copies_input(simple_receipt_skeleton):
    receipt = Receipt.from_json(simple_receipt_skeleton)
    simple_receipt_skeleton["items"][0]["price"] = "9.99"
    simple_receipt_skeleton["items"].append({"shortDescription": "Dasani", "price": "1.40"})
    assert len(receipt.items) == 1
    assert receipt.items[0].price == "1.25"


def test_from_json_ignores_unknown_attributes(simple_receipt_skeleton):
    simple_receipt_skeleton["cashier"] = "Bob"
    assert Receipt.from_json(simple_receipt_skeleton).retailer == "Target"


@pytest.mark.parametrize("payload", [None, [], "receipt", 25])
def test_from_json_rejects_non_objects(payload):
    with pytest.raises(ValidationError):
        Receipt.from_json(payload)


def test_from_json_rejects_missing_attributes(simple_receipt_skeleton):
    for attribute in required_receipt_attributes:
        payload = dict(simple_receipt_skeleton)
        del payload[attribute]
        with pytest.raises(ValidationError):
            Receipt.from_json(payload)


def test_from_json_rejects_invalid_attribute_formats(simple_receipt_skeleton):
    for attribute in required_receipt_attributes:
        if attribute == "items":
            continue
        for elem in [None, [], 25, 3.88, {}, ""]:
            payload = dict(simple_receipt_skeleton, **{attribute: elem})
            with pytest.raises(ValidationError):
                Receipt.from_json(payload)


@pytest.mark.parametrize("items", [None, 25, 3.88, {}, "", []])
def test_from_json_rejects_invalid_items(simple_receipt_skeleton, items):
    simple_receipt_skeleton["items"] = items
    with pytest.raises(ValidationError):
        Receipt.from_json(simple_receipt_skeleton)


@pytest.mark.parametrize("item", [
    None, 25, [], "",
    {"price": "1.25"},
    {"shortDescription": "Pepsi"},
    {"shortDescription": "", "price": "1.25"},
    {"shortDescription": "Pepsi", "price": 1.25},
    {"shortDescription": None, "price": "1.25"},
])
def test_from_json_rejects_invalid_item(simple_receipt_skeleton, item):
    simple_receipt_skeleton["items"][0] = item
    with pytest.raises(ValidationError):
        Receipt.from_json(simple_receipt_skeleton)
