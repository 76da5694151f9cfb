from __future__ import annotations

from .estimator import (
    EstimateRequest,
    InputValidationError,
    compute_tax_summary,
    estimate,
    validate_amounts,
)
from .fields import (
    CLI_NUMERIC_FIELDS,
    canonicalize_with_metadata,
    coerce_for_field,
    load_data_file,
    parse_amount,
    parse_freeform_text,
)

__all__ = [
    "CLI_NUMERIC_FIELDS",
    "EstimateRequest",
    "InputValidationError",
    "canonicalize_with_metadata",
    "coerce_for_field",
    "compute_tax_summary",
    "estimate",
    "load_data_file",
    "parse_amount",
    "parse_freeform_text",
    "validate_amounts",
]
