# =============================================================================
# core/predict.py  —  logi_master_predict (ETA / KPI prediction)
# =============================================================================
#
# Predicts transit time for a route and cargo weight.  The seed is taken
# over "origin|destination|weight", so changing any one of the three moves
# the prediction, and repeating the same request never does.
#
#   eta_days     = 7 + seed % 7             (7–13)
#   customs_days = 2 + seed % 2             (reported as a 2-day range)
#   confidence   = 0.82 + (seed % 5) / 100  (0.82–0.86)
#
# The weather / congestion / risk "drivers" are coarse buckets picked by
# seed modulo; they explain the ETA, they don't change it.
# =============================================================================

from core.formatting import format_number
from core.models import CallContext, ToolResult
from core.registry import LogisticsTool
from core.seed import hash_to_int
from core.validation import require_text, validate_weight

ON_TIME_RATE_TARGET = 0.93


def route_seed(origin: str, destination: str, weight: float) -> int:
    return hash_to_int(f"{origin}|{destination}|{format_number(weight)}")


def predict_eta(args: dict, context: CallContext) -> ToolResult:
    origin = require_text(args.get("origin"), "origin", 80)
    destination = require_text(args.get("destination"), "destination", 80)
    weight = validate_weight(args.get("weight"))

    seed = route_seed(origin, destination, weight)
    eta_days = 7 + seed % 7
    customs_days = 2 + seed % 2
    confidence = round(0.82 + (seed % 5) / 100, 2)

    drivers = {
        "weather": "MODERATE" if seed % 3 == 0 else "LOW",
        "port_congestion": "MEDIUM" if seed % 4 == 0 else "LOW",
        "customs_days": f"{customs_days}-{customs_days + 1}",
    }

    json = {
        "ok": True,
        "ts": context.now(),
        "route": {"origin": origin, "destination": destination},
        "cargo_weight_kg": format_number(weight),
        "eta_days": eta_days,
        "confidence": confidence,
        "drivers": drivers,
        "kpi_targets": {
            "on_time_rate": ON_TIME_RATE_TARGET,
            "risk": "LOW" if seed % 2 == 0 else "MEDIUM",
        },
    }

    text = (
        f"🚢 ETA {eta_days}d (conf {confidence * 100:.0f}%)  "
        f"weather:{drivers['weather'].lower()} / congestion:{drivers['port_congestion'].lower()} / "
        f"customs:{drivers['customs_days']}d"
    )
    return ToolResult(json=json, text=text)


PREDICT_TOOL = LogisticsTool(
    name="logi_master_predict",
    description="ETA/KPI prediction (deterministic seed)",
    input_schema={
        "type": "object",
        "properties": {
            "origin": {"type": "string"},
            "destination": {"type": "string"},
            "weight": {"type": "number"},
        },
        "required": ["origin", "destination", "weight"],
    },
    handler=predict_eta,
)
