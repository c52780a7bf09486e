"""
Formatting helpers for document templates.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def format_currency(amount: Union[int, float, Decimal], symbol: str = '$') -> str:
    """
    Format an amount as currency with thousands separators.

    Rounds half up to cents: 10.999 -> '$11.00', -5 -> '-$5.00'.
    """
    value = Decimal(str(amount)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    sign = '-' if value < 0 else ''
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_date(value: Union[str, date, datetime]) -> str:
    """
    Format a date as 'January 15, 2026'.

    Strings are parsed as ISO 8601 dates or datetimes.

    Raises:
        ValueError: If a string is not an ISO date
    """
    if isinstance(value, str):
        if 'T' in value:
            # fromisoformat() only accepts a 'Z' suffix from Python 3.11
            if value.endswith('Z'):
                value = value[:-1] + '+00:00'
            value = datetime.fromisoformat(value)
        else:
            value = date.fromisoformat(value)
    return f"{value:%B} {value.day}, {value.year}"


def format_quantity(quantity: Union[int, float]) -> str:
    """Render a quantity without a trailing '.0' for whole numbers"""
    if isinstance(quantity, float) and quantity.is_integer():
        return str(int(quantity))
    return str(quantity)
