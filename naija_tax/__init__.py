"""
Nigerian tax estimator for the 2026 tax year.

Personal Income Tax (PIT) for employees and the self-employed, and Company
Income Tax (CIT) for CAC-registered businesses.
"""
from __future__ import annotations

from naija_tax.core import (
    CITResult,
    PITResult,
    calculate_cit,
    calculate_monthly_pit,
    calculate_pit,
    format_naira,
)

__version__ = "0.1.0"

__all__ = [
    "CITResult",
    "PITResult",
    "calculate_cit",
    "calculate_monthly_pit",
    "calculate_pit",
    "format_naira",
]
