import re
from datetime import date, datetime, time

from exceptions import ParseError

RECEIPT_DATE_FORMAT = '%Y-%m-%d'
RECEIPT_TIME_FORMAT = '%H:%M'
TOLERANCE = 1e-9

# strptime accepts unpadded fields and non-ASCII digits, so the exact shape is checked first
AMOUNT_PATTERN = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)


def parse_amount(amount: str) -> float:
    """ Parses a plain decimal numeral such as 12.25 into a float """
    if not isinstance(amount, str) or not AMOUNT_PATTERN.fullmatch(amount):
        raise ParseError(f"Error: invalid amount ({amount})")
    return float(amount)


def parse_date(value: str) -> date:
    """ Parses a YYYY-MM-DD purchase date """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise ParseError(f"Error: invalid purchase date ({value})")
    try:
        return datetime.strptime(value, RECEIPT_DATE_FORMAT).date()
    except ValueError:
        raise ParseError(f"Error: invalid purchase date ({value})")


def parse_time(value: str) -> time:
    """ Parses a 24-hour HH:MM purchase time """
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        raise ParseError(f"Error: invalid purchase time ({value})")
    try:
        return datetime.strptime(value, RECEIPT_TIME_FORMAT).time()
    except ValueError:
        raise ParseError(f"Error: invalid purchase time ({value})")


def approximately_equal(a: float, b: float) -> bool:
    """ Float comparison used everywhere instead of == """
    return abs(a - b) <= TOLERANCE
