"""Pure PIT/CIT calculations for the 2026 Nigerian tax year."""
from __future__ import annotations

from .cit import CITResult, calculate_cit
from .currency import format_naira
from .pit import PITResult, calculate_monthly_pit, calculate_pit
from .progressive import TaxBracket, calculate_progressive_tax, round_cents, to_decimal
from .schedule import (
    CIT_RATE_HIGHER,
    CIT_RATE_LOWER,
    CIT_THRESHOLD,
    PIT_BRACKETS_2026,
    TAX_DISCLAIMER,
    TAX_YEAR,
)

__all__ = [
    "CITResult",
    "CIT_RATE_HIGHER",
    "CIT_RATE_LOWER",
    "CIT_THRESHOLD",
    "PITResult",
    "PIT_BRACKETS_2026",
    "TAX_DISCLAIMER",
    "TAX_YEAR",
    "TaxBracket",
    "calculate_cit",
    "calculate_monthly_pit",
    "calculate_pit",
    "calculate_progressive_tax",
    "format_naira",
    "round_cents",
    "to_decimal",
]
