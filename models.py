from dataclasses import dataclass
from typing import Tuple

from exceptions import ValidationError

required_receipt_attributes = ["retailer", "total", "items", "purchaseDate", "purchaseTime"]
required_item_attributes = ["shortDescription", "price"]


@dataclass(frozen=True)
class Item:
    shortDescription: str
    price: str

    @classmethod
    def from_json(cls, item) -> "Item":
        """ Validates structure of a single item in the json input """
        if not isinstance(item, dict):
            raise ValidationError("Error: invalid receipt item format")
        for attribute in required_item_attributes:
            if not isinstance(item.get(attribute), str) or not item[attribute]:
                raise ValidationError("Error: invalid receipt item format")
        return cls(shortDescription=item["shortDescription"], price=item["price"])


@dataclass(frozen=True)
class Receipt:
    retailer: str
    purchaseDate: str
    purchaseTime: str
    items: Tuple[Item, ...]
    total: str

    @classmethod
    def from_json(cls, receipt) -> "Receipt":
        """ Validates structure of the json input and builds an immutable receipt from it """
        if not isinstance(receipt, dict):
            raise ValidationError("Error: receipt is not a json object")
        for attribute in required_receipt_attributes:
            if attribute not in receipt:  # check if attribute is missing
                raise ValidationError(f"Error: missing {attribute} in receipt")
            if attribute != "items" and not isinstance(receipt[attribute], str):  # check attribute type
                raise ValidationError(f"Error: invalid {attribute} format")
            if attribute != "items" and not receipt[attribute]:
                raise ValidationError(f"Error: empty {attribute} in receipt")

        if not isinstance(receipt["items"], list):
            raise ValidationError("Error: invalid receipt items list format")
        if len(receipt["items"]) < 1:  # check if the items list is empty
            raise ValidationError("Error: receipt items list is empty")

        return cls(
            retailer=receipt["retailer"],
            purchaseDate=receipt["purchaseDate"],
            purchaseTime=receipt["purchaseTime"],
            items=tuple(Item.from_json(item) for item in receipt["items"]),
            total=receipt["total"],
        )
