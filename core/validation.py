# =============================================================================
# core/validation.py  —  Input Validators
# =============================================================================
#
# Two kinds of checks live here, and the difference matters:
#
#   HARD preconditions (raise LogisticsError BAD_INPUT immediately):
#     - validate_container_id   ISO 6346 shape
#     - validate_weight         finite and > 0
#     - require_text            field present and non-empty
#
#   SOFT business rules (return a ValidationResult, never raise):
#     - validate_incoterm       known Incoterm?
#     - validate_hs_code        known HS code?
#
#   And one that can't fail at all:
#     - extract_invoice_number  pattern match with a fixed fallback
#
# The soft validators take the ReferenceData to check against as a
# parameter, so they stay pure functions of (input, reference data).
# =============================================================================

import math
import re
from typing import Optional

from core.errors import ErrorCode, assert_or_raise
from core.formatting import clamp_string
from core.models import ValidationReason, ValidationResult
from core.reference_data import ReferenceData, get_reference_data

# ISO 6346: owner code + category (4 letters) and serial + check digit (7 digits)
ISO_CONTAINER_PATTERN = re.compile(r"[A-Z]{4}[0-9]{7}")

# AE-series numbers, HVDC-INV-###, INV-###, or a bare 8-digit run
INVOICE_PATTERN = re.compile(
    r"AE[0-9]{6,}|HVDC[-_]INV[-_][0-9]{3,}|INV[-_][0-9]{3,}|[0-9]{8}",
    re.IGNORECASE,
)
FALLBACK_INVOICE_NUMBER = "HVDC-INV-001"


def extract_invoice_number(invoice_path) -> str:
    """Pull an invoice identifier out of a file path or name."""
    match = INVOICE_PATTERN.search(clamp_string(invoice_path))
    return match.group(0).upper() if match else FALLBACK_INVOICE_NUMBER


def validate_container_id(value) -> str:
    """Normalize a container id to uppercase and require the ISO 6346 shape."""
    container_id = clamp_string(value, 50).upper()
    assert_or_raise(
        ISO_CONTAINER_PATTERN.fullmatch(container_id),
        ErrorCode.BAD_INPUT,
        "container_id must be ISO 6346 compliant",
        {"container_id": container_id},
    )
    return container_id


def validate_incoterm(incoterm, reference: Optional[ReferenceData] = None) -> ValidationResult:
    if not incoterm:
        return ValidationResult(valid=False, reason=ValidationReason.MISSING)

    reference = reference or get_reference_data()
    normalized = clamp_string(incoterm, 8).upper()
    valid = normalized in reference.incoterms
    return ValidationResult(
        valid=valid,
        code=normalized,
        reason=ValidationReason.OK if valid else ValidationReason.UNKNOWN_INCOTERM,
    )


def validate_hs_code(hs_code, reference: Optional[ReferenceData] = None) -> ValidationResult:
    """Check an HS code (punctuation ignored, e.g. "8504.90") against the table."""
    if not hs_code:
        return ValidationResult(valid=False, reason=ValidationReason.MISSING)

    reference = reference or get_reference_data()
    normalized = re.sub(r"[^0-9]", "", clamp_string(hs_code, 10))
    description = reference.hs_codes.get(normalized)
    return ValidationResult(
        valid=bool(description),
        code=normalized,
        description=description,
        reason=ValidationReason.OK if description else ValidationReason.UNKNOWN_HS_CODE,
    )


def validate_weight(weight) -> float:
    """Coerce a weight to float and require it to be finite and positive."""
    try:
        numeric = float(weight)
    except (TypeError, ValueError, OverflowError):
        numeric = math.nan
    assert_or_raise(
        math.isfinite(numeric) and numeric > 0,
        ErrorCode.BAD_INPUT,
        "weight must be greater than zero",
    )
    return numeric


def require_text(value, field_name: str, max_length: int = 256) -> str:
    """Clamp a required text field; BAD_INPUT if it ends up empty."""
    text = clamp_string(value, max_length)
    assert_or_raise(text, ErrorCode.BAD_INPUT, f"{field_name} required")
    return text
