from __future__ import annotations

from decimal import Decimal


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Convert a numeric value to Decimal without picking up binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_amount(value: Decimal | int) -> str:
    """
    Render an amount in plain notation without trailing zeros.

    Examples: 5.0 -> "5", 200.00 -> "200", 12.50 -> "12.5".
    """
    normalized = to_decimal(value).normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")
