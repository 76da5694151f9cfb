from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, List

from naija_tax.core.cit import CITResult, calculate_cit
from naija_tax.core.pit import PITResult, calculate_pit


class TaxCategory(str, Enum):
    EMPLOYEE = "employee"
    SELF_EMPLOYED = "self-employed"
    CAC_BUSINESS = "cac-business"

    @property
    def uses_cit(self) -> bool:
        return self is TaxCategory.CAC_BUSINESS

    @property
    def profile(self) -> "CategoryProfile":
        return _PROFILES[self]


@dataclass(frozen=True)
class CategoryProfile:
    category: TaxCategory
    label: str
    income_label: str
    deductions_label: str
    deductions_hint: str
    period: str


_PROFILES: Dict[TaxCategory, CategoryProfile] = {
    TaxCategory.EMPLOYEE: CategoryProfile(
        category=TaxCategory.EMPLOYEE,
        label="Employee / Salaried",
        income_label="Monthly Salary (₦)",
        deductions_label="Allowances / Reliefs (₦)",
        deductions_hint="Tax-free allowances like housing, transport, or pension contributions",
        period="monthly",
    ),
    TaxCategory.SELF_EMPLOYED: CategoryProfile(
        category=TaxCategory.SELF_EMPLOYED,
        label="Self-employed / Informal Business",
        income_label="Monthly Revenue (₦)",
        deductions_label="Monthly Expenses (₦)",
        deductions_hint="Deductible business expenses like rent, utilities, supplies",
        period="monthly",
    ),
    TaxCategory.CAC_BUSINESS: CategoryProfile(
        category=TaxCategory.CAC_BUSINESS,
        label="CAC-registered Business",
        income_label="Annual Revenue (₦)",
        deductions_label="Annual Expenses (₦)",
        deductions_hint="All deductible business expenses for the year",
        period="annual",
    ),
}

_ALIASES: Dict[str, TaxCategory] = {
    "employee": TaxCategory.EMPLOYEE,
    "salaried": TaxCategory.EMPLOYEE,
    "salary": TaxCategory.EMPLOYEE,
    "paye": TaxCategory.EMPLOYEE,
    "selfemployed": TaxCategory.SELF_EMPLOYED,
    "informal": TaxCategory.SELF_EMPLOYED,
    "soleproprietor": TaxCategory.SELF_EMPLOYED,
    "freelancer": TaxCategory.SELF_EMPLOYED,
    "cacbusiness": TaxCategory.CAC_BUSINESS,
    "cac": TaxCategory.CAC_BUSINESS,
    "company": TaxCategory.CAC_BUSINESS,
    "business": TaxCategory.CAC_BUSINESS,
    "ltd": TaxCategory.CAC_BUSINESS,
}


class UnknownCategoryError(KeyError):
    pass


def _normalize(raw: str) -> str:
    return "".join(ch for ch in raw.lower() if ch.isalnum())


def parse_category(value: TaxCategory | str) -> TaxCategory:
    if isinstance(value, TaxCategory):
        return value
    key = _normalize(str(value or ""))
    try:
        return _ALIASES[key]
    except KeyError as exc:
        choices = ", ".join(category.value for category in TaxCategory)
        raise UnknownCategoryError(f"Unknown tax category '{value}'; expected one of {choices}") from exc


def list_categories() -> List[CategoryProfile]:
    return [_PROFILES[category] for category in TaxCategory]


def calculate_for_category(
    category: TaxCategory | str,
    income: int | float | str | Decimal,
    deductions: int | float | str | Decimal = 0,
) -> PITResult | CITResult:
    resolved = parse_category(category)
    if resolved.uses_cit:
        return calculate_cit(income, deductions)
    return calculate_pit(income, deductions)


__all__ = [
    "CategoryProfile",
    "TaxCategory",
    "UnknownCategoryError",
    "calculate_for_category",
    "list_categories",
    "parse_category",
]
