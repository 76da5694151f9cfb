from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from naija_tax.core.cit import CITResult
from naija_tax.core.currency import format_naira
from naija_tax.core.pit import PITResult
from naija_tax.core.schedule import MONTHS_PER_YEAR, TAX_DISCLAIMER, TAX_YEAR
from naija_tax.tax.dispatch import TaxCategory, calculate_for_category, parse_category

from .fields import parse_amount

logger = logging.getLogger("naija_tax.estimator")

INCOME_REQUIRED_MESSAGE = "Please enter a valid income amount"
NEGATIVE_DEDUCTIONS_MESSAGE = "Deductions cannot be negative"


class InputValidationError(ValueError):
    pass


class EstimateRequest(BaseModel):
    category: TaxCategory = Field(
        TaxCategory.EMPLOYEE,
        description="Taxpayer category: employee, self-employed or cac-business",
        validation_alias=AliasChoices("category", "type", "tax_type"),
    )
    income: Decimal = Field(
        ...,
        description="Monthly salary/revenue, or annual revenue for a CAC business",
        validation_alias=AliasChoices("income", "salary", "revenue", "monthly_income", "annual_revenue"),
    )
    deductions: Decimal = Field(
        Decimal("0"),
        description="Allowances/reliefs or deductible expenses for the same period",
        validation_alias=AliasChoices("deductions", "allowances", "expenses", "annual_expenses"),
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: Any) -> TaxCategory:
        try:
            return parse_category(value)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from exc

    @field_validator("income", "deductions", mode="before")
    @classmethod
    def _parse_amounts(cls, value: Any) -> Decimal:
        return parse_amount(value)


def validate_amounts(income: Decimal, deductions: Decimal) -> None:
    if income <= 0:
        raise InputValidationError(INCOME_REQUIRED_MESSAGE)
    if deductions < 0:
        raise InputValidationError(NEGATIVE_DEDUCTIONS_MESSAGE)


def _pit_rows(result: PITResult, annual_net: Decimal) -> list[tuple[str, str]]:
    return [
        ("Taxable Income", format_naira(result.taxable_income)),
        ("Monthly Tax", format_naira(result.monthly_tax)),
        ("Annual Tax", format_naira(result.annual_tax)),
        ("Monthly Net", format_naira(result.net_income)),
        ("Annual Net", format_naira(annual_net)),
        ("Effective Tax Rate", f"{result.effective_rate.normalize():f}%"),
    ]


def _cit_rows(result: CITResult) -> list[tuple[str, str]]:
    return [
        ("Profit", format_naira(result.profit)),
        ("Annual Company Tax", format_naira(result.annual_tax)),
        ("Net Profit After Tax", format_naira(result.net_profit)),
        ("Effective Tax Rate", f"{result.effective_rate.normalize():f}%"),
    ]


def compute_tax_summary(
    category: TaxCategory | str,
    income: Any,
    deductions: Any = 0,
) -> dict[str, Any]:
    resolved = parse_category(category)
    income_value = parse_amount(income)
    deductions_value = parse_amount(deductions)
    try:
        validate_amounts(income_value, deductions_value)
    except InputValidationError as exc:
        logger.info("Rejected %s input: %s", resolved.value, exc)
        raise

    result = calculate_for_category(resolved, income_value, deductions_value)
    logger.debug(
        "Calculated %s tax: income=%s deductions=%s result=%s",
        resolved.value,
        income_value,
        deductions_value,
        result,
    )

    summary: dict[str, Any] = {
        "category": resolved.value,
        "category_label": resolved.profile.label,
        "regime": "CIT" if resolved.uses_cit else "PIT",
        "period": resolved.profile.period,
        "income": income_value,
        "deductions": deductions_value,
        "result": result.as_dict(),
        "tax_year": TAX_YEAR,
        "disclaimer": TAX_DISCLAIMER,
    }
    if isinstance(result, PITResult):
        annual_net = result.net_income * MONTHS_PER_YEAR
        summary["annual_net_income"] = annual_net
        summary["rows"] = _pit_rows(result, annual_net)
    else:
        summary["rows"] = _cit_rows(result)
    return summary


def estimate(payload: EstimateRequest) -> dict[str, Any]:
    return compute_tax_summary(payload.category, payload.income, payload.deductions)


__all__ = [
    "EstimateRequest",
    "INCOME_REQUIRED_MESSAGE",
    "InputValidationError",
    "NEGATIVE_DEDUCTIONS_MESSAGE",
    "compute_tax_summary",
    "estimate",
    "validate_amounts",
]
