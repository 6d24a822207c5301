from exceptions import ParseError, ValidationError
from models import Receipt
from parsing import approximately_equal, parse_amount, parse_date, parse_time


def validate(receipt: Receipt):
    """
    Checks that a structurally sound receipt is also semantically valid: the
    purchase date and time parse, every amount parses and the item prices add
    up to the total. Raises ValidationError on the first failed check.

    The message carried by the error names the failed check. It is meant for
    server logs only and must not be sent back to the client.
    """
    if not receipt.items:
        raise ValidationError("Error: receipt items list is empty")
    try:
        parse_date(receipt.purchaseDate)
        parse_time(receipt.purchaseTime)
        total = parse_amount(receipt.total)
        items_sum = sum(parse_amount(item.price) for item in receipt.items)
    except ParseError as e:
        raise ValidationError(str(e)) from e

    if not approximately_equal(total, items_sum):
        raise ValidationError(f"Error: item prices ({items_sum}) do not add up to receipt total ({total})")
