from __future__ import annotations

from decimal import Decimal

from .progressive import round_cents

NAIRA_SIGN = "₦"


def format_naira(amount: int | float | str | Decimal) -> str:
    """Render ``amount`` as Naira with grouping and at most two kobo digits.

    >>> format_naira(1234567.5)
    '₦1,234,567.5'
    >>> format_naira(21000)
    '₦21,000'
    """
    value = round_cents(amount)
    sign = "-" if value < 0 else ""
    text = f"{value.copy_abs():,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{sign}{NAIRA_SIGN}{text}"


__all__ = ["NAIRA_SIGN", "format_naira"]
