# =============================================================================
# core/zero_guard.py  —  The "ZERO" Safety Rule
# =============================================================================
#
# Some conditions are not "warnings"; they are hard stops.  When one of
# them holds, the operation is aborted and a human has to take over:
#
#   1. hs_risk >= threshold   →  HS_RISK_STOP   (manual customs review)
#   2. certification missing  →  CERT_MISSING   (FANR/MOIAT paperwork)
#
# The checks run in that order and the first one that trips wins.  These
# errors are always raised, never downgraded to a soft validation result.
# =============================================================================

from typing import Optional

from core.config import AppConfig
from core.errors import ErrorCode, LogisticsError


def enforce_zero_guard(
    hs_risk: float = 0.0,
    cert_missing: bool = False,
    threshold: Optional[float] = None,
) -> None:
    """Raise LogisticsError if the risk context crosses a hard limit.

    Args:
        hs_risk: HS classification risk score (0.0 – 1.0).
        cert_missing: True when a required certification is absent.
        threshold: hs-risk stop level; defaults to AppConfig.HS_RISK_STOP.
    """
    limit = AppConfig.HS_RISK_STOP if threshold is None else threshold

    if hs_risk >= limit:
        raise LogisticsError(
            ErrorCode.HS_RISK_STOP,
            "High HS risk requires manual review",
            {"hs_risk": hs_risk, "threshold": limit},
        )

    if cert_missing:
        raise LogisticsError(ErrorCode.CERT_MISSING, "FANR/MOIAT certification missing")
