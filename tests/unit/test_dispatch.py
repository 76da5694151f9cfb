from decimal import Decimal as D

import pytest

from naija_tax.core.cit import CITResult
from naija_tax.core.pit import PITResult
from naija_tax.tax.dispatch import (
    TaxCategory,
    UnknownCategoryError,
    calculate_for_category,
    list_categories,
    parse_category,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("employee", TaxCategory.EMPLOYEE),
        ("Salaried", TaxCategory.EMPLOYEE),
        ("self-employed", TaxCategory.SELF_EMPLOYED),
        ("Self Employed", TaxCategory.SELF_EMPLOYED),
        ("informal", TaxCategory.SELF_EMPLOYED),
        ("cac-business", TaxCategory.CAC_BUSINESS),
        ("CAC", TaxCategory.CAC_BUSINESS),
        (TaxCategory.CAC_BUSINESS, TaxCategory.CAC_BUSINESS),
    ],
)
def test_parse_category_aliases(raw, expected):
    assert parse_category(raw) is expected


def test_unknown_category_raises_key_error():
    with pytest.raises(UnknownCategoryError, match="expected one of"):
        parse_category("pensioner")
    with pytest.raises(KeyError):
        parse_category("")


def test_only_cac_business_uses_cit():
    assert [c.uses_cit for c in TaxCategory] == [False, False, True]


def test_categories_listed_in_display_order():
    profiles = list_categories()
    assert [p.category for p in profiles] == list(TaxCategory)
    assert profiles[0].income_label == "Monthly Salary (₦)"
    assert profiles[1].deductions_label == "Monthly Expenses (₦)"
    assert profiles[2].period == "annual"


def test_pit_path_for_individuals():
    for category in ("employee", "self-employed"):
        result = calculate_for_category(category, 500000, 100000)
        assert isinstance(result, PITResult)
        assert result.monthly_tax == D("31999.89")


def test_cit_path_for_cac_business():
    result = calculate_for_category(TaxCategory.CAC_BUSINESS, 30_000_000)
    assert isinstance(result, CITResult)
    assert result.annual_tax == D("6500000.00")
