from decimal import Decimal as D

import pytest
from pydantic import ValidationError

from naija_tax.core.schedule import TAX_DISCLAIMER, TAX_YEAR
from naija_tax.tax.dispatch import TaxCategory
from naija_tax.wizard.estimator import (
    INCOME_REQUIRED_MESSAGE,
    NEGATIVE_DEDUCTIONS_MESSAGE,
    EstimateRequest,
    InputValidationError,
    compute_tax_summary,
    estimate,
)


def test_employee_summary_includes_annual_net():
    summary = compute_tax_summary("employee", "500,000", "100,000")
    assert summary["regime"] == "PIT"
    assert summary["category_label"] == "Employee / Salaried"
    assert summary["result"]["monthly_tax"] == D("31999.89")
    assert summary["annual_net_income"] == D("4416001.32")
    assert ("Annual Net", "₦4,416,001.32") in summary["rows"]
    assert ("Effective Tax Rate", "8%") in summary["rows"]
    assert summary["tax_year"] == TAX_YEAR
    assert summary["disclaimer"] == TAX_DISCLAIMER


def test_cac_summary_uses_cit_rows():
    summary = compute_tax_summary(TaxCategory.CAC_BUSINESS, "30m")
    assert summary["regime"] == "CIT"
    assert "annual_net_income" not in summary
    assert summary["rows"] == [
        ("Profit", "₦30,000,000"),
        ("Annual Company Tax", "₦6,500,000"),
        ("Net Profit After Tax", "₦23,500,000"),
        ("Effective Tax Rate", "21.67%"),
    ]


@pytest.mark.parametrize("income", ["", "0", "-5", "not a number"])
def test_rejects_missing_or_non_positive_income(income):
    with pytest.raises(InputValidationError, match=INCOME_REQUIRED_MESSAGE):
        compute_tax_summary("employee", income, "0")


def test_rejects_negative_deductions():
    with pytest.raises(InputValidationError, match=NEGATIVE_DEDUCTIONS_MESSAGE):
        compute_tax_summary("self-employed", "100000", "-1")


def test_validation_error_is_a_value_error():
    assert issubclass(InputValidationError, ValueError)


def test_estimate_request_aliases():
    req = EstimateRequest.model_validate({"salary": "400k", "type": "Self Employed"})
    assert req.category is TaxCategory.SELF_EMPLOYED
    assert req.income == D("400000")
    assert req.deductions == 0
    summary = estimate(req)
    assert summary["result"]["monthly_tax"] == D("31999.89")


def test_estimate_request_rejects_unknown_fields_and_categories():
    with pytest.raises(ValidationError):
        EstimateRequest.model_validate({"income": 1000, "bonus": 5})
    with pytest.raises(ValidationError):
        EstimateRequest.model_validate({"income": 1000, "category": "pensioner"})


def test_rejected_input_is_logged(caplog):
    caplog.set_level("INFO", logger="naija_tax.estimator")
    with pytest.raises(InputValidationError):
        compute_tax_summary("employee", "0")
    assert any("Rejected employee input" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize("income", [float("inf"), float("nan"), True])
def test_non_finite_income_is_rejected(income):
    with pytest.raises(InputValidationError, match=INCOME_REQUIRED_MESSAGE):
        compute_tax_summary("employee", income)


@pytest.mark.parametrize(
    "category, period",
    [("employee", "monthly"), ("self-employed", "monthly"), ("cac", "annual")],
)
def test_summary_reports_input_period(category, period):
    assert compute_tax_summary(category, 1_000_000)["period"] == period
