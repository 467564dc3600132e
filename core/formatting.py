# =============================================================================
# core/formatting.py  —  String, Number & Time Helpers
# =============================================================================
#
# Small, dependency-free helpers shared by every tool handler:
#   - clamp_string:   bound untrusted text before it reaches a payload
#   - round_half_up:  the rounding the cost formulas are specified with
#   - format_*:       the human-readable bits of the one-line summaries
#   - now_utc / to_iso_utc: the ONLY places that touch the wall clock or
#                           parse dates
# =============================================================================

from datetime import date, datetime, timezone
import math
import re

from core.errors import ErrorCode, LogisticsError


def clamp_string(value, max_length: int = 256) -> str:
    """Coerce to str (None → "") and cut to at most `max_length` characters."""
    if value is None:
        return ""
    return str(value)[:max_length]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def format_currency(value) -> str:
    """Format as whole US dollars, e.g. 139500 → "$139,500"."""
    amount = round_half_up(float(value or 0))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}"


def format_percent(value, fraction_digits: int = 0) -> str:
    return f"{float(value):.{fraction_digits}f}%"


def format_number(value: float):
    """Render a number the way JSON does: integral floats lose their ".0"."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# =============================================================================
# Time
# =============================================================================
# Timestamps are ISO-8601 UTC with millisecond precision and a "Z" suffix,
# e.g. "2025-08-18T14:30:00.000Z".
# =============================================================================
def _to_iso(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_utc() -> str:
    """Current instant as an ISO-8601 UTC string."""
    return _to_iso(datetime.now(timezone.utc))


# Besides strict ISO-8601, the slash form "2025/09/01", single-digit month or
# day, and fractions of any length ("…:00.5Z") are accepted.
_DATE_HEAD = re.compile(r"(\d{4})[-/](\d{1,2})[-/](\d{1,2})")
_FRACTION = re.compile(r"(?<=\d)\.(\d+)")


def _normalize_date_text(text: str) -> str:
    head = _DATE_HEAD.match(text)
    if head:
        year, month, day = head.groups()
        text = f"{year}-{int(month):02d}-{int(day):02d}{text[head.end():]}"
    return _FRACTION.sub(lambda match: "." + match.group(1)[:6].ljust(6, "0"), text, count=1)


def _invalid_date(value) -> LogisticsError:
    return LogisticsError(
        ErrorCode.INVALID_DATE,
        "Invalid date value supplied",
        {"value": clamp_string(value, 64)},
    )


def to_iso_utc(value) -> str:
    """Parse a date/datetime (or date string) into an ISO-8601 UTC string.

    Naive values are taken to be UTC.  Anything unparseable, or outside the
    representable range once shifted to UTC, raises LogisticsError(INVALID_DATE).
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    else:
        text = clamp_string(value, 64).strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(_normalize_date_text(text))
        except ValueError:
            raise _invalid_date(value) from None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    try:
        return _to_iso(moment)
    except OverflowError:
        raise _invalid_date(value) from None


__all__ = [
    "clamp_string",
    "format_currency",
    "format_number",
    "format_percent",
    "now_utc",
    "round_half_up",
    "to_iso_utc",
]
