from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal

from .progressive import calculate_progressive_tax, money_context, round_cents, to_decimal
from .schedule import MONTHS_PER_YEAR, PIT_BRACKETS_2026

D = Decimal
_ZERO = D("0.00")


@dataclass(frozen=True)
class PITResult:
    taxable_income: D
    monthly_tax: D
    annual_tax: D
    net_income: D
    effective_rate: D

    def as_dict(self) -> dict[str, D]:
        return asdict(self)


def calculate_monthly_pit(monthly_income: int | float | str | D) -> D:
    """Monthly PIT on ``monthly_income``; zero for non-positive amounts."""
    return calculate_progressive_tax(PIT_BRACKETS_2026, monthly_income)


def calculate_pit(
    monthly_income: int | float | str | D,
    allowances_or_expenses: int | float | str | D = 0,
) -> PITResult:
    """PIT breakdown for an employee or self-employed individual.

    ``allowances_or_expenses`` are tax-free allowances for employees or
    deductible expenses for the self-employed. Callers are expected to pass a
    non-negative figure; the taxable base itself never drops below zero.
    """
    income = to_decimal(monthly_income)
    deductions = to_decimal(allowances_or_expenses)
    with money_context(income, deductions):
        taxable = round_cents(max(_ZERO, income - deductions))
        monthly_tax = calculate_monthly_pit(taxable)
        effective = monthly_tax / taxable * 100 if taxable > 0 else _ZERO
        return PITResult(
            taxable_income=taxable,
            monthly_tax=monthly_tax,
            annual_tax=monthly_tax * MONTHS_PER_YEAR,
            net_income=taxable - monthly_tax,
            effective_rate=round_cents(effective),
        )


__all__ = ["PITResult", "calculate_monthly_pit", "calculate_pit"]
