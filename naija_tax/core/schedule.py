"""
Rate tables for the 2026 Nigerian tax year.

PIT is charged on monthly taxable income through eight progressive bands.
CIT is charged on annual profit: 20% up to the ₦25m threshold, 30% on the
excess.
"""
from __future__ import annotations

from decimal import Decimal

from .progressive import TaxBracket, validate_schedule

D = Decimal

TAX_YEAR = 2026

PIT_BRACKETS_2026 = validate_schedule(
    [
        TaxBracket(D("0"), D("300000"), D("0.07")),
        TaxBracket(D("300001"), D("600000"), D("0.11")),
        TaxBracket(D("600001"), D("1100000"), D("0.15")),
        TaxBracket(D("1100001"), D("1600000"), D("0.19")),
        TaxBracket(D("1600001"), D("3200000"), D("0.21")),
        TaxBracket(D("3200001"), D("3900000"), D("0.24")),
        TaxBracket(D("3900001"), D("6000000"), D("0.27")),
        TaxBracket(D("6000001"), None, D("0.30")),
    ]
)

CIT_THRESHOLD = D("25000000")  # ₦25 million
CIT_RATE_LOWER = D("0.20")
CIT_RATE_HIGHER = D("0.30")

MONTHS_PER_YEAR = 12

TAX_DISCLAIMER = (
    "This calculator provides estimates based on 2026 Nigerian tax laws. "
    "Consult a tax professional for personalized advice."
)
