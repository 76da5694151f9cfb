from __future__ import annotations

import json
import re
import tomllib
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from naija_tax.tax.dispatch import parse_category

CLI_NUMERIC_FIELDS = {"income", "deductions"}

_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "category": ("type", "tax type", "taxpayer type", "category", "status"),
    "income": (
        "income",
        "monthly income",
        "salary",
        "monthly salary",
        "revenue",
        "monthly revenue",
        "annual revenue",
        "gross income",
    ),
    "deductions": (
        "deductions",
        "allowances",
        "reliefs",
        "allowances or reliefs",
        "expenses",
        "monthly expenses",
        "annual expenses",
    ),
}

NUM_SUFFIXES = {
    "k": Decimal("1000"),
    "m": Decimal("1000000"),
    "b": Decimal("1000000000"),
}

_KEY_VALUE_RE = re.compile(r"^\s*([^#:=]+?)\s*(?:[:=]|->)\s*(.+)$")
_ALIAS_LOOKUP: dict[str, str] = {}


def _normalize_key(raw: str) -> str:
    return re.sub(r"[^a-z0-9]", "", raw.lower())


for canonical, aliases in _FIELD_ALIASES.items():
    for alias in (canonical, *aliases):
        _ALIAS_LOOKUP.setdefault(_normalize_key(alias), canonical)


def canonical_key(raw: str) -> str | None:
    return _ALIAS_LOOKUP.get(_normalize_key(raw))


def parse_amount(text: Any) -> Decimal:
    """Read a Naira amount typed by a person.

    Empty or unreadable text counts as zero, as do booleans and non-finite
    numbers; rejecting a zero income is the estimator's job, not the parser's.
    Text with trailing junk such as ``"12abc"`` is unreadable as a whole and
    also counts as zero.
    """
    if text is None or isinstance(text, bool):
        return Decimal("0")
    if isinstance(text, (int, float, Decimal)):
        value = text if isinstance(text, Decimal) else Decimal(str(text))
        return value if value.is_finite() else Decimal("0")
    cleaned = str(text).strip().lower()
    for token in ("₦", "ngn", "naira", ",", " ", "_"):
        cleaned = cleaned.replace(token, "")
    cleaned = cleaned.replace("−", "-").replace("–", "-")
    multiplier = Decimal("1")
    if cleaned and cleaned[-1] in NUM_SUFFIXES:
        multiplier = NUM_SUFFIXES[cleaned[-1]]
        cleaned = cleaned[:-1]
    if cleaned in {"", "-", "."}:
        return Decimal("0")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    if not value.is_finite():
        return Decimal("0")
    return value * multiplier


def coerce_for_field(field: str, value: Any) -> Any:
    if value is None:
        return None
    if field in CLI_NUMERIC_FIELDS:
        return parse_amount(value)
    if field == "category":
        return parse_category(str(value))
    return str(value).strip()


def canonicalize_with_metadata(raw: Any) -> tuple[dict[str, Any], list[tuple[str, str]], list[str]]:
    if not isinstance(raw, dict):
        return {}, [], []
    result: dict[str, Any] = {}
    mapping: list[tuple[str, str]] = []
    unknown: list[str] = []
    for key, value in raw.items():
        canonical = canonical_key(str(key))
        if not canonical:
            unknown.append(str(key))
            continue
        try:
            coerced = coerce_for_field(canonical, value)
        except KeyError as exc:
            raise ValueError(f"Field '{key}': {exc.args[0]}") from exc
        if coerced is not None:
            result[canonical] = coerced
            mapping.append((str(key), canonical))
    return result, mapping, unknown


def parse_freeform_text(text: str) -> tuple[dict[str, Any], list[tuple[str, str]], list[str]]:
    pairs: dict[str, str] = {}
    unknown: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        match = _KEY_VALUE_RE.match(line)
        if match is None:
            unknown.append(line)
            continue
        raw_key, raw_value = match.groups()
        pairs[raw_key.strip()] = raw_value.strip()
    data, mapping, unknown_keys = canonicalize_with_metadata(pairs)
    return data, mapping, unknown + unknown_keys


def load_data_file(path: str | Path) -> tuple[dict[str, Any], dict[str, Any]]:
    """Load answers from TOML/JSON/TXT.

    Returns a tuple of ``(data, preview)`` where the preview lists which
    source keys were mapped and which were ignored.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    preview: dict[str, Any] = {"mapping": [], "unknown": [], "source": str(path)}
    if suffix == ".toml":
        with path.open("rb") as handle:
            raw = tomllib.load(handle)
        data, mapping, unknown = canonicalize_with_metadata(raw)
    elif suffix == ".json":
        with path.open(encoding="utf-8") as handle:
            raw = json.load(handle)
        data, mapping, unknown = canonicalize_with_metadata(raw)
    elif suffix == ".txt":
        data, mapping, unknown = parse_freeform_text(path.read_text(encoding="utf-8"))
    else:
        raise ValueError(f"Unsupported data file: {path.name}")
    preview["mapping"] = mapping
    preview["unknown"] = unknown
    return data, preview


__all__ = [
    "CLI_NUMERIC_FIELDS",
    "NUM_SUFFIXES",
    "canonical_key",
    "canonicalize_with_metadata",
    "coerce_for_field",
    "load_data_file",
    "parse_amount",
    "parse_freeform_text",
]
