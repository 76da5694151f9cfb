from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, getcontext, localcontext
from typing import Iterable, Sequence

D = Decimal
_CENT = D("0.01")
# digits kept beyond the integer part: two kobo places plus guard digits
_GUARD_DIGITS = 6


@dataclass(frozen=True)
class TaxBracket:
    lower: D
    upper: D | None
    rate: D


def to_decimal(value: int | float | str | D) -> D:
    return value if isinstance(value, D) else D(str(value))


def money_context(*values: D):
    """Decimal context wide enough to carry every kobo of ``values``."""
    digits = max((value.adjusted() for value in values if value.is_finite() and value), default=0)
    return localcontext(prec=max(getcontext().prec, digits + _GUARD_DIGITS))


def round_cents(value: int | float | str | D) -> D:
    amount = to_decimal(value)
    with money_context(amount):
        return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


def validate_schedule(brackets: Sequence[TaxBracket]) -> tuple[TaxBracket, ...]:
    """Check that a bracket table starts at zero, ascends and ends open.

    Returns the table as a tuple so callers can keep it immutable.
    """
    if not brackets:
        raise ValueError("Bracket schedule must not be empty")
    if brackets[0].lower != 0:
        raise ValueError("Bracket schedule must start at 0")
    if brackets[-1].upper is not None:
        raise ValueError("Last bracket must be open-ended")
    for prev, current in zip(brackets, brackets[1:]):
        if prev.upper is None:
            raise ValueError("Only the last bracket may be open-ended")
        if current.lower < prev.upper:
            raise ValueError(f"Bracket starting at {current.lower} overlaps previous bracket")
        if current.rate <= prev.rate:
            raise ValueError(f"Bracket rates must increase, got {prev.rate} then {current.rate}")
    for bracket in brackets:
        if bracket.upper is not None and bracket.upper <= bracket.lower:
            raise ValueError(f"Empty bracket {bracket.lower}-{bracket.upper}")
    return tuple(brackets)


def calculate_progressive_tax(
    brackets: Iterable[TaxBracket],
    income: int | float | str | D,
) -> D:
    amount = to_decimal(income)
    if amount <= 0:
        return D("0.00")
    tax = D("0")
    with money_context(amount):
        for bracket in brackets:
            if amount <= bracket.lower:
                break
            hi = amount if bracket.upper is None else min(amount, bracket.upper)
            span = hi - bracket.lower
            if span > 0:
                tax += span * bracket.rate
        return round_cents(tax)


__all__ = [
    "TaxBracket",
    "calculate_progressive_tax",
    "money_context",
    "round_cents",
    "to_decimal",
    "validate_schedule",
]
