# =============================================================================
# core/catalog.py  —  The Registered Tool Set
# =============================================================================
# The order here is the order the agent host sees in the tool listing.
# =============================================================================

from core.container_status import CONTAINER_STATUS_TOOL
from core.health import HEALTH_PING_TOOL
from core.invoice_audit import INVOICE_AUDIT_TOOL
from core.predict import PREDICT_TOOL
from core.registry import LogisticsTool, ToolRegistry
from core.shipping_cost import SHIPPING_COST_TOOL
from core.weather_tie import WEATHER_TIE_TOOL

ALL_TOOLS: list[LogisticsTool] = [
    HEALTH_PING_TOOL,
    INVOICE_AUDIT_TOOL,
    CONTAINER_STATUS_TOOL,
    SHIPPING_COST_TOOL,
    PREDICT_TOOL,
    WEATHER_TIE_TOOL,
]


def build_registry() -> ToolRegistry:
    """A fresh registry holding every logistics tool."""
    return ToolRegistry(ALL_TOOLS)
