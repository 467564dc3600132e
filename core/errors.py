# =============================================================================
# core/errors.py  —  Domain Errors (the only way a tool call can fail)
# =============================================================================
#
# Every expected failure carries a machine-readable ErrorCode.  Handlers
# RAISE these and never catch them; the dispatch boundary
# (core/responses.py → dispatch_tool_call) is the single place that turns
# them into an error envelope for the agent.
#
# Soft business rules (unknown Incoterm, unknown HS code) are NOT errors.
# They come back as ValidationResult objects so a report can still be built.
# =============================================================================

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Closed set of error codes that can appear in an error envelope."""

    BAD_INPUT = "BAD_INPUT"                # Required field missing or malformed
    INVALID_DATE = "INVALID_DATE"          # A date string could not be parsed
    HS_RISK_STOP = "HS_RISK_STOP"          # ZERO guard: hs-risk over threshold
    CERT_MISSING = "CERT_MISSING"          # ZERO guard: certification missing
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    PROMPT_NOT_FOUND = "PROMPT_NOT_FOUND"
    UNEXPECTED = "UNEXPECTED"              # Anything raised without a code


class LogisticsError(Exception):
    """A domain error with a stable code, a message and optional details."""

    def __init__(self, code: ErrorCode, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __repr__(self) -> str:
        return f"LogisticsError({self.code.value}, {self.message!r})"


def assert_or_raise(
    condition: Any,
    code: ErrorCode,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> None:
    """Raise a LogisticsError unless `condition` is truthy."""
    if not condition:
        raise LogisticsError(code, message, details)
