from decimal import Decimal as D

import pytest

from naija_tax.core.pit import calculate_monthly_pit
from naija_tax.core.schedule import PIT_BRACKETS_2026


def test_first_bracket_edge():
    assert calculate_monthly_pit(D("300000")) == D("21000.00")
    assert calculate_monthly_pit(D("300000")) == D("300000") * D("0.07")
    # 0.01 * 0.11 rounds away at the cent
    assert calculate_monthly_pit(D("300001")) == D("21000.00")
    assert calculate_monthly_pit(D("300101")) == D("21011.00")


@pytest.mark.parametrize(
    "income, expected",
    [
        (D("100000"), D("7000.00")),
        (D("500000"), D("42999.89")),
        (D("600000"), D("53999.89")),
        (D("1000000"), D("113999.74")),
        (D("7000000"), D("1594998.53")),
    ],
)
def test_marginal_tax_values(income, expected):
    assert calculate_monthly_pit(income) == expected


def test_no_jump_at_bracket_edges():
    for current, following in zip(PIT_BRACKETS_2026, PIT_BRACKETS_2026[1:]):
        at_upper = calculate_monthly_pit(current.upper)
        at_next_lower = calculate_monthly_pit(following.lower)
        assert at_upper == at_next_lower
        step = calculate_monthly_pit(following.lower + 100) - at_next_lower
        assert step == following.rate * 100


def test_top_bracket_is_open_ended():
    top = PIT_BRACKETS_2026[-1]
    assert top.upper is None
    base = calculate_monthly_pit(D("10000000"))
    assert calculate_monthly_pit(D("10001000")) - base == D("300.00")


def test_monotonic_across_schedule():
    incomes = [D(step * 25_000) for step in range(0, 320)]
    incomes += [b.lower for b in PIT_BRACKETS_2026] + [b.upper for b in PIT_BRACKETS_2026 if b.upper]
    incomes.sort()
    taxes = [calculate_monthly_pit(value) for value in incomes]
    assert taxes == sorted(taxes)
