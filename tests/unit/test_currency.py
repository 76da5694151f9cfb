from decimal import Decimal as D

import pytest

from naija_tax.core.currency import format_naira


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₦0"),
        (21000, "₦21,000"),
        (1234567.5, "₦1,234,567.5"),
        (D("1234.10"), "₦1,234.1"),
        (D("999.99"), "₦999.99"),
        (0.005, "₦0.01"),
        (D("-2500.456"), "-₦2,500.46"),
        ("25000000", "₦25,000,000"),
    ],
)
def test_format_naira(amount, expected):
    assert format_naira(amount) == expected


def test_formats_amounts_beyond_default_precision():
    assert format_naira(10**27) == "₦1,000,000,000,000,000,000,000,000,000"
    assert format_naira(-(10**27)) == "-₦1,000,000,000,000,000,000,000,000,000"
