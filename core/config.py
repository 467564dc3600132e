# =============================================================================
# core/config.py  —  Runtime Configuration (environment + .env)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Collects every tunable knob of the server in ONE place.  Values come from
#   environment variables (optionally loaded from a .env file) and fall back
#   to the defaults below.
#
# NAMING:
#   Every variable is prefixed with LOGISTICS__ so it can't collide with the
#   agent host's own settings.  The one exception is PORT, which hosting
#   platforms set for us.
#
# THE TWO RISK KNOBS ARE INDEPENDENT:
#   HS_RISK_STOP is the ZERO-guard threshold.  HS_RISK_FLOOR/HS_RISK_BUCKETS
#   shape the placeholder hs-risk figure the invoice audit produces.  They
#   are tuned separately, so raising the floor is how you exercise the
#   guard end-to-end.
# =============================================================================

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class AppConfig:
    # --- Server identity (advertised over MCP and HTTP) ---
    SERVER_NAME: str = "hvdc-logistics-mcp"
    DISPLAY_NAME: str = "HVDC Logistics MCP Server"
    VERSION: str = os.getenv("LOGISTICS__VERSION", "1.2.0")

    LOG_LEVEL: str = os.getenv("LOGISTICS__LOG_LEVEL", "INFO")

    # --- Reference data (Incoterm list, HS code table) ---
    RESOURCE_DIR: Path = Path(os.getenv("LOGISTICS__RESOURCE_DIR", str(_PROJECT_ROOT / "resources")))

    # --- ZERO guard and the invoice-audit risk formula ---
    HS_RISK_STOP: float = float(os.getenv("LOGISTICS__HS_RISK_STOP", "0.8"))
    HS_RISK_FLOOR: float = float(os.getenv("LOGISTICS__HS_RISK_FLOOR", "0.05"))
    HS_RISK_BUCKETS: int = int(os.getenv("LOGISTICS__HS_RISK_BUCKETS", "25"))

    # --- HTTP side-channel ---
    HTTP_ENABLED: bool = _env_bool("LOGISTICS__HTTP_ENABLED", "true")
    HTTP_HOST: str = os.getenv("LOGISTICS__HTTP_HOST", "0.0.0.0")
    HTTP_PORT: int = int(os.getenv("PORT", "3000"))

    # --- Demo agent host ---
    AGENT_MODEL: str = os.getenv("LOGISTICS__AGENT_MODEL", "openrouter/openai/gpt-4o")

    # --- Money formatting ---
    CURRENCY: str = "USD"
