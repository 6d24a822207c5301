import math
from typing import Sequence

from exceptions import ParseError
from models import Item, Receipt
from parsing import approximately_equal, parse_amount, parse_date, parse_time

POINTS_RETAILER_NAME_ALPHANUM_CHARACTER = 1
POINTS_TOTAL_HAS_NO_CENTS = 50
POINTS_TOTAL_IS_MULTIPLE_OF_QUARTERS = 25
POINTS_ITEMS_COUNT = 5
POINTS_ITEM_DESCRIPTION = 0.2
POINTS_ODD_PURCHASE_DAY = 6
POINTS_VALID_PURCHASE_HOUR = 10
REWARD_ITEM_DESCRIPTION_LENGTH_FACTOR = 3
REWARD_TOTAL_MULTIPLE = 0.25
REWARD_HOUR_START = 14
REWARD_HOUR_END = 16  # inclusive, so 16:59 still scores


def score_retailer(retailer_name: str) -> int:
    """ One point for every ASCII letter or digit in the retailer name """
    return sum(POINTS_RETAILER_NAME_ALPHANUM_CHARACTER for c in retailer_name if c.isascii() and c.isalnum())


def score_total(total: str) -> int:
    """ Calculates points for a round total and for a total that is a multiple of a quarter """
    try:
        parsed_total = parse_amount(total)
    except ParseError:
        return 0
    points = 0
    if approximately_equal(parsed_total, float(math.trunc(parsed_total))):
        points += POINTS_TOTAL_HAS_NO_CENTS
    if approximately_equal(parsed_total % REWARD_TOTAL_MULTIPLE, 0):
        points += POINTS_TOTAL_IS_MULTIPLE_OF_QUARTERS
    return points


def score_item_description(item: Item) -> int:
    """ Points for an item whose trimmed description length in UTF-8 bytes is a multiple of 3 """
    if len(item.shortDescription.strip().encode("utf-8")) % REWARD_ITEM_DESCRIPTION_LENGTH_FACTOR != 0:
        return 0
    try:
        price = parse_amount(item.price)
    except ParseError:
        return 0
    return math.ceil(price * POINTS_ITEM_DESCRIPTION)


def score_items(items: Sequence[Item]) -> int:
    """ Calculates points for every pair of items and for item descriptions """
    points = (len(items) // 2) * POINTS_ITEMS_COUNT
    for item in items:
        points += score_item_description(item)
    return points


def score_purchase_date(purchase_date: str) -> int:
    """ Points for a purchase made on an odd day of the month """
    try:
        date_obj = parse_date(purchase_date)
    except ParseError:
        return 0
    return POINTS_ODD_PURCHASE_DAY if date_obj.day % 2 != 0 else 0


def score_purchase_time(purchase_time: str) -> int:
    """ Points for a purchase made between 14:00 and 16:59 """
    try:
        time_obj = parse_time(purchase_time)
    except ParseError:
        return 0
    return POINTS_VALID_PURCHASE_HOUR if REWARD_HOUR_START <= time_obj.hour <= REWARD_HOUR_END else 0


def score(receipt: Receipt) -> int:
    """
    Calculates points earned from each component of a validated receipt.

    Every rule is evaluated independently and the results are summed. A rule
    that meets data it cannot parse contributes nothing instead of failing.
    """
    points = 0
    points += score_retailer(receipt.retailer)
    points += score_total(receipt.total)
    points += score_items(receipt.items)
    points += score_purchase_date(receipt.purchaseDate)
    points += score_purchase_time(receipt.purchaseTime)
    return points
