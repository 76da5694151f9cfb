from __future__ import annotations

import argparse
import json
import os
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Literal

from rich.console import Console
from rich.table import Table

from naija_tax.config import get_settings
from naija_tax.core.currency import format_naira
from naija_tax.core.schedule import (
    CIT_RATE_HIGHER,
    CIT_RATE_LOWER,
    CIT_THRESHOLD,
    PIT_BRACKETS_2026,
    TAX_DISCLAIMER,
    TAX_YEAR,
)
from naija_tax.tax.dispatch import TaxCategory, UnknownCategoryError, list_categories, parse_category
from naija_tax.telemetry import cli_session
from naija_tax.wizard import (
    InputValidationError,
    compute_tax_summary,
    load_data_file,
    parse_amount,
)

ColorPreference = Literal["auto", "always", "never"]


def _resolve_color_preference(pref: ColorPreference) -> ColorPreference:
    if pref == "auto" and os.getenv("NO_COLOR"):
        return "never"
    return pref


def _get_console(pref: ColorPreference) -> Console:
    resolved = _resolve_color_preference(pref)
    return Console(
        force_terminal=True if resolved == "always" else None,
        no_color=resolved == "never",
        highlight=False,
    )


def _build_table(title: str, columns: list[str]) -> Table:
    table = Table(title=title, expand=False)
    for column in columns:
        table.add_column(column)
    return table


def _format_rate(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"


def _category_arg(value: str) -> TaxCategory:
    try:
        return parse_category(value)
    except UnknownCategoryError as exc:
        raise argparse.ArgumentTypeError(exc.args[0]) from exc


def _load_answers(path_value: str | None, console: Console) -> dict[str, Any]:
    if not path_value:
        return {}
    path = Path(path_value).expanduser()
    if not path.exists():
        console.print(f"NOTE: Could not find {path}.")
        return {}
    try:
        data, preview = load_data_file(path)
    except ValueError as exc:
        console.print(f"NOTE: {path.name}: {exc}")
        return {}
    for item in preview.get("unknown", []):
        console.print(f"NOTE: ignored entry '{item}' in {path.name}")
    return data


def _ask_amount(label: str, *, required: bool, hint: str | None = None) -> Decimal:
    suffix = "" if required else " [0]"
    note = f" - {hint}" if hint else ""
    raw = input(f"{label}{note}{suffix}: ")
    return parse_amount(raw)


def _print_summary(summary: dict[str, Any], console: Console) -> None:
    title = f"{summary['category_label']} - {summary['regime']} {summary['tax_year']} ({summary['period']})"
    table = _build_table(title, ["Metric", "Value"])
    for metric, value in summary["rows"]:
        table.add_row(metric, value)
    console.print(table)
    console.print(summary["disclaimer"], soft_wrap=True)


def _print_brackets(console: Console) -> None:
    pit = _build_table(f"PIT monthly brackets ({TAX_YEAR})", ["From", "To", "Rate"])
    for bracket in PIT_BRACKETS_2026:
        upper = format_naira(bracket.upper) if bracket.upper is not None else "and above"
        pit.add_row(format_naira(bracket.lower), upper, _format_rate(bracket.rate))
    console.print(pit)

    cit = _build_table(f"CIT annual tiers ({TAX_YEAR})", ["Profit", "Rate"])
    cit.add_row(f"Up to {format_naira(CIT_THRESHOLD)}", _format_rate(CIT_RATE_LOWER))
    cit.add_row(f"Above {format_naira(CIT_THRESHOLD)}", _format_rate(CIT_RATE_HIGHER))
    console.print(cit)
    console.print(TAX_DISCLAIMER, soft_wrap=True)


def _run_estimate(args: argparse.Namespace, console: Console) -> int:
    settings = get_settings()
    answers = _load_answers(args.data, console)
    category = args.category or answers.get("category") or settings.default_category
    profile = category.profile

    income = args.income if args.income is not None else answers.get("income")
    deductions = args.deductions if args.deductions is not None else answers.get("deductions")
    prompted = income is None
    try:
        if prompted:
            income = _ask_amount(profile.income_label, required=True)
        if deductions is None:
            deductions = (
                _ask_amount(profile.deductions_label, required=False, hint=profile.deductions_hint)
                if prompted
                else Decimal("0")
            )
    except EOFError:
        console.print("Error: no answer received; pass --income or --data when input is not interactive.")
        return 1

    try:
        summary = compute_tax_summary(category, income, deductions)
    except InputValidationError as exc:
        console.print(f"Error: {exc}")
        return 1

    if args.json:
        payload = {key: value for key, value in summary.items() if key != "rows"}
        print(json.dumps(payload, indent=2, default=str))
    else:
        _print_summary(summary, console)
    return 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="naija-tax",
        description=f"Nigerian PIT/CIT estimator for {TAX_YEAR}.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="estimate",
        choices=["estimate", "brackets"],
        help="Action to perform.",
    )
    categories = ", ".join(f"{item.category.value} ({item.label})" for item in list_categories())
    parser.add_argument(
        "--type",
        dest="category",
        type=_category_arg,
        help=f"Taxpayer category: {categories}.",
    )
    parser.add_argument("--income", type=parse_amount, help="Monthly salary/revenue, or annual revenue for CAC businesses.")
    parser.add_argument("--deductions", type=parse_amount, help="Allowances, reliefs or expenses for the same period.")
    parser.add_argument("--data", help="Path to a TOML/JSON/TXT file with answers.")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output preference (default: auto).",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const="never",
        help="Alias for --color never.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    console = _get_console(args.color)
    with cli_session(args.command):
        if args.command == "brackets":
            _print_brackets(console)
            return
        status = _run_estimate(args, console)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
