# =============================================================================
# core/weather_tie.py  —  logi_master_weather_tie
# =============================================================================
#
# A weather-tied go/no-go snapshot for a route and departure date.  The risk
# profile is fixed (low storm risk, moderate sea state) so the
# recommendation is always PROCEED with a 3-day window starting the day
# after departure, and a 48-hour delay as the fallback.
#
# The departure date must parse.  A bad date is INVALID_DATE rather than
# BAD_INPUT: the field was supplied, it just isn't a date.
# =============================================================================

from core.formatting import to_iso_utc
from core.models import CallContext, ToolResult
from core.registry import LogisticsTool
from core.validation import require_text

WEATHER_PROFILE = {
    "storm_risk": 0.15,
    "sea_state_m": "2-3",
    "wind_kt": "12-18",
}
OPTIMAL_WINDOW_DAYS = 3


def weather_tie(args: dict, context: CallContext) -> ToolResult:
    route = require_text(args.get("route"), "route", 120)
    departure_date = require_text(args.get("departure_date"), "departure_date", 40)
    departure_utc = to_iso_utc(departure_date)

    json = {
        "ok": True,
        "ts": context.now(),
        "route": route,
        "departure_utc": departure_utc,
        "weather": dict(WEATHER_PROFILE),
        "risk": "LOW",
        "recommendation": "PROCEED",
        "optimal_window_days": OPTIMAL_WINDOW_DAYS,
        "backup": "delay_48h",
    }

    text = f"🌤️ Weather-tie: {json['risk']} risk, {OPTIMAL_WINDOW_DAYS}-day optimal window from T+1"
    return ToolResult(json=json, text=text)


WEATHER_TIE_TOOL = LogisticsTool(
    name="logi_master_weather_tie",
    description="Weather-tied plan snapshot",
    input_schema={
        "type": "object",
        "properties": {
            "route": {"type": "string"},
            "departure_date": {"type": "string"},
        },
        "required": ["route", "departure_date"],
    },
    handler=weather_tie,
)
