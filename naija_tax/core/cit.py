from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal

from .progressive import money_context, round_cents, to_decimal
from .schedule import CIT_RATE_HIGHER, CIT_RATE_LOWER, CIT_THRESHOLD

D = Decimal
_ZERO = D("0.00")


@dataclass(frozen=True)
class CITResult:
    profit: D
    annual_tax: D
    net_profit: D
    effective_rate: D

    def as_dict(self) -> dict[str, D]:
        return asdict(self)


def cit_on_profit(profit: D) -> D:
    if profit <= 0:
        return _ZERO
    with money_context(profit):
        if profit <= CIT_THRESHOLD:
            return round_cents(profit * CIT_RATE_LOWER)
        return round_cents(CIT_THRESHOLD * CIT_RATE_LOWER + (profit - CIT_THRESHOLD) * CIT_RATE_HIGHER)


def calculate_cit(
    annual_revenue: int | float | str | D,
    annual_expenses: int | float | str | D = 0,
) -> CITResult:
    """Company Income Tax for a CAC-registered business."""
    revenue = to_decimal(annual_revenue)
    expenses = to_decimal(annual_expenses)
    with money_context(revenue, expenses):
        profit = round_cents(max(_ZERO, revenue - expenses))
        tax = cit_on_profit(profit)
        effective = tax / profit * 100 if profit > 0 else _ZERO
        return CITResult(
            profit=profit,
            annual_tax=tax,
            net_profit=profit - tax,
            effective_rate=round_cents(effective),
        )


__all__ = ["CITResult", "calculate_cit", "cit_on_profit"]
