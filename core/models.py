# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows between the transport, the registry and the tool handlers.  They
# carry (almost) no behavior.
#
# WHY DATACLASSES?
#   - They auto-generate __init__, __repr__, and __eq__ for free.
#   - They make tool contracts crystal-clear: a handler returns a ToolResult,
#     not "some dict that hopefully has a json key."
#   - frozen=True where a value must never change after construction
#     (validation results are facts, not scratch space).
#
# DESIGN PRINCIPLE — "No Phantom Fields":
#   If a field shows up in a payload, the agent *will* reason about it.
#   Optional fields that are None are dropped when serialized.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any, Callable, Optional

from core.formatting import now_utc
from core.reference_data import ReferenceData, get_reference_data
from core.zero_guard import enforce_zero_guard


class ValidationReason(str, Enum):
    """Why a soft validation (Incoterm / HS code) passed or failed."""

    OK = "OK"
    MISSING = "MISSING"
    UNKNOWN_INCOTERM = "UNKNOWN_INCOTERM"
    UNKNOWN_HS_CODE = "UNKNOWN_HS_CODE"


# -----------------------------------------------------------------------------
# ValidationResult — outcome of an Incoterm or HS-code check
# -----------------------------------------------------------------------------
# A *soft* rule: an unknown Incoterm degrades the report (valid=False) but
# doesn't abort the call.  Compare with BAD_INPUT, which raises.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ValidationResult:
    """Result of checking a code against reference data."""

    valid: bool                        # True iff `code` resolves in reference data
    reason: ValidationReason
    code: Optional[str] = None         # Normalized code (absent when MISSING)
    description: Optional[str] = None  # HS-code description, when found

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"valid": self.valid}
        if self.code is not None:
            result["code"] = self.code
        if self.description is not None:
            result["description"] = self.description
        result["reason"] = self.reason.value
        return result


# -----------------------------------------------------------------------------
# ToolResult — what every handler returns
# -----------------------------------------------------------------------------
#   json: the structured payload (always ok=True plus a "ts" timestamp)
#   text: a one-line, human-readable summary for the agent to quote
# Errors never travel through here; they are raised instead.
# -----------------------------------------------------------------------------
@dataclass
class ToolResult:
    """A successful tool call: structured payload + summary line."""

    json: dict[str, Any]
    text: str = ""


# -----------------------------------------------------------------------------
# CallContext — everything a handler may touch besides its arguments
# -----------------------------------------------------------------------------
# Built fresh for each call.  Injecting the clock, the guard and the logger
# keeps handlers free of hidden globals, so a test can pin the timestamp or
# swap the guard without monkeypatching anything.
# -----------------------------------------------------------------------------
@dataclass
class CallContext:
    """Per-call collaborators handed to a tool handler."""

    now: Callable[[], str] = now_utc
    zero_guard: Callable[..., None] = enforce_zero_guard
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("logistics.tools"))
    reference: ReferenceData = field(default_factory=get_reference_data)
