# =============================================================================
# core/shipping_cost.py  —  calculate_hvdc_shipping_cost
# =============================================================================
#
# WHAT THIS TOOL DOES:
#   Estimates a port-to-port cost for HVDC equipment (transformers, reactors,
#   switchgear) from its weight, with fixed reserves for demurrage and
#   detention (DEM/DET).
#
# THE FORMULA (USD, every line an integer):
#   base               15,000
#   weight             ceil(weight_kg × 2.8)
#   hvdc_handling      round(base × 0.30)
#   insurance          round((base + weight) × 0.05)
#   demurrage_reserve   2,800
#   detention_reserve   1,800
#   total              sum of the six lines above
#
#   "round" is half-up.  Each line is rounded before summing, so the total
#   is an exact integer sum with no floating-point drift.
#
# INCOTERM:
#   Checked softly (see core/validation.py); CFR is assumed when the caller
#   doesn't pass one.
# =============================================================================

import math

from core.errors import ErrorCode, assert_or_raise
from core.formatting import format_currency, format_number, round_half_up
from core.models import CallContext, ToolResult
from core.registry import LogisticsTool
from core.validation import require_text, validate_incoterm, validate_weight

BASE_RATE = 15000
RATE_PER_KG = 2.8
HVDC_HANDLING_RATE = 0.3
INSURANCE_RATE = 0.05
DEMURRAGE_RESERVE = 2800
DETENTION_RESERVE = 1800
DEFAULT_INCOTERM = "CFR"

NOTES = ["Port-to-port", "HVDC handling", "Tracking", "Security"]


def cost_breakdown(weight_kg: float) -> dict[str, int]:
    """Line items and total for a shipment of `weight_kg`."""
    weighted = weight_kg * RATE_PER_KG
    assert_or_raise(math.isfinite(weighted), ErrorCode.BAD_INPUT, "weight out of range", {"weight": weight_kg})
    weight_cost = math.ceil(weighted)
    hvdc_handling = round_half_up(BASE_RATE * HVDC_HANDLING_RATE)
    insurance = round_half_up((BASE_RATE + weight_cost) * INSURANCE_RATE)
    lines = {
        "base": BASE_RATE,
        "weight": weight_cost,
        "hvdc_handling": hvdc_handling,
        "insurance": insurance,
        "demurrage_reserve": DEMURRAGE_RESERVE,
        "detention_reserve": DETENTION_RESERVE,
    }
    lines["total"] = sum(lines.values())
    return lines


def shipping_cost(args: dict, context: CallContext) -> ToolResult:
    equipment_type = require_text(args.get("equipment_type"), "equipment_type", 80).upper()
    weight_kg = validate_weight(args.get("weight"))
    origin = require_text(args.get("origin_port"), "origin_port", 80)
    destination = require_text(args.get("destination_port"), "destination_port", 80)

    incoterm_arg = args.get("incoterm")
    incoterm = validate_incoterm(DEFAULT_INCOTERM if incoterm_arg is None else incoterm_arg, context.reference)

    breakdown = cost_breakdown(weight_kg)

    json = {
        "ok": True,
        "ts": context.now(),
        "equipment": equipment_type,
        "route": {"origin": origin, "destination": destination},
        "weight_kg": format_number(weight_kg),
        "incoterm": incoterm.to_dict(),
        "breakdown_usd": breakdown,
        "notes": list(NOTES),
    }

    text = (
        f"💰 Cost {format_currency(breakdown['total'])}  "
        f"({format_currency(breakdown['base'])} base / {format_currency(breakdown['weight'])} weight / "
        f"{format_currency(breakdown['hvdc_handling'])} hvdc / {format_currency(breakdown['insurance'])} ins)"
    )
    return ToolResult(json=json, text=text)


SHIPPING_COST_TOOL = LogisticsTool(
    name="calculate_hvdc_shipping_cost",
    description="HVDC shipping cost calc with DEM/DET placeholders",
    input_schema={
        "type": "object",
        "properties": {
            "equipment_type": {"type": "string"},
            "weight": {"type": "number"},
            "origin_port": {"type": "string"},
            "destination_port": {"type": "string"},
            "incoterm": {"type": "string"},
        },
        "required": ["equipment_type", "weight", "origin_port", "destination_port"],
    },
    handler=shipping_cost,
)
