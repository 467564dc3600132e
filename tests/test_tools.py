import pytest

from core.catalog import build_registry
from core.config import AppConfig
from core.container_status import container_status
from core.errors import ErrorCode, LogisticsError
from core.health import health_ping
from core.invoice_audit import invoice_audit
from core.predict import predict_eta
from core.responses import dispatch_tool_call, envelope_json
from core.shipping_cost import cost_breakdown, shipping_cost
from core.weather_tie import weather_tie
from tests.conftest import FIXED_TS

SHIPPING_ARGS = {
    "equipment_type": "Transformer",
    "weight": 12000,
    "origin_port": "BUSAN",
    "destination_port": "JEBEL ALI",
    "incoterm": "DAP",
}


# --- health_ping -------------------------------------------------------------

def test_health_ping_echoes(context):
    result = health_ping({"echo": "hi"}, context)
    assert result.json == {"ok": True, "ts": FIXED_TS, "echo": "hi"}
    assert result.text == "✅ health ping echo:hi"


def test_health_ping_without_echo(context):
    result = health_ping({}, context)
    assert result.json["echo"] == ""
    assert result.text == "✅ health ping"


def test_health_ping_clamps_echo(context):
    assert len(health_ping({"echo": "x" * 1000}, context).json["echo"]) == 256


# --- invoice audit -----------------------------------------------------------

def test_invoice_audit_report(context):
    result = invoice_audit(
        {"invoice_path": "HVDC-INV-123.pdf", "incoterm": "CFR", "hs_code": "850490"},
        context,
    )
    json = result.json
    assert json["ok"] is True
    assert json["ts"] == FIXED_TS
    assert json["invoice_no"] == "HVDC-INV-123"
    assert json["metrics"] == {"ocr_confidence": 0.95, "hs_risk": 0.11}
    assert json["validations"]["incoterm"] == {"valid": True, "code": "CFR", "reason": "OK"}
    assert json["validations"]["hs_code"]["valid"] is True
    assert json["amounts"]["total"] == 102000 + 33000 + 4500
    assert json["next"] == ["sap_entry_ready", "approval_workflow", "payment_queue"]
    assert result.text == (
        "📋 Invoice Audit ✔  File:HVDC-INV-123.pdf  Inv:HVDC-INV-123  OCR:95.0%  "
        "Incoterm:CFR  HS:850490  Total:$139,500"
    )


def test_invoice_audit_flags_unknown_codes(context):
    result = invoice_audit({"invoice_path": "scan.pdf", "incoterm": "xyz"}, context)
    assert result.json["invoice_no"] == "HVDC-INV-001"
    assert result.json["validations"]["incoterm"]["reason"] == "UNKNOWN_INCOTERM"
    assert result.json["validations"]["hs_code"] == {"valid": False, "reason": "MISSING"}
    assert "HS:N/A" in result.text
    assert result.text.endswith("⚠️INCOTERM  ⚠️HS")


def test_invoice_audit_requires_path(context):
    with pytest.raises(LogisticsError) as excinfo:
        invoice_audit({"invoice_path": ""}, context)
    assert excinfo.value.code is ErrorCode.BAD_INPUT


def test_invoice_audit_runs_the_guard(context):
    calls = []
    context.zero_guard = lambda **kwargs: calls.append(kwargs)
    invoice_audit({"invoice_path": "HVDC-INV-123.pdf"}, context)
    assert calls == [{"hs_risk": pytest.approx(0.11), "cert_missing": False}]


def test_default_risk_formula_stays_under_the_stop_level(context):
    for n in range(100, 200):
        invoice_audit({"invoice_path": f"INV-{n}.pdf"}, context)


def test_raised_risk_floor_trips_the_guard(context, monkeypatch):
    monkeypatch.setattr(AppConfig, "HS_RISK_FLOOR", 0.9)
    envelope = dispatch_tool_call(build_registry(), "logi_master_invoice_audit", {"invoice_path": "HVDC-INV-123.pdf"}, context)
    payload = envelope_json(envelope)
    assert payload["code"] == "HS_RISK_STOP"
    assert payload["message"] == "High HS risk requires manual review"


# --- container status --------------------------------------------------------

def test_container_status_snapshot(context):
    result = container_status({"container_id": "abcd1234567"}, context)
    json = result.json
    assert json["container_id"] == "ABCD1234567"
    assert json["status"] == "IN_TRANSIT"
    assert json["progress_pct"] == 86
    assert json["location"] == {"port": "JEBEL ALI", "terminal": "T4"}
    assert json["vessel"] == {"name": "ADNOC RELIANCE", "voyage": "SD-2026-0847"}
    assert json["eta_utc"] == "2025-08-18T14:30:00Z"
    assert all(json["conditions"].values())
    assert result.text == "📦 ABCD1234567 transit 86%  Vessel:ADNOC RELIANCE  ETA:2025-08-18T14:30:00Z"


@pytest.mark.parametrize("container_id", ["MSCU1234567", "TGHU7654321", "ZZZZ0000000", "abcd7654321"])
def test_container_progress_range(context, container_id):
    json = container_status({"container_id": container_id}, context).json
    assert 50 <= json["progress_pct"] <= 90
    even = json["location"]["port"] == "BUSAN"
    assert json["vessel"]["name"] == ("SAMSUNG DYNASTY" if even else "ADNOC RELIANCE")


def test_container_status_requires_iso_id(context):
    with pytest.raises(LogisticsError):
        container_status({}, context)


# --- shipping cost -----------------------------------------------------------

def test_cost_breakdown_is_an_exact_integer_sum():
    breakdown = cost_breakdown(12000)
    assert breakdown == {
        "base": 15000,
        "weight": 33600,
        "hvdc_handling": 4500,
        "insurance": 2430,
        "demurrage_reserve": 2800,
        "detention_reserve": 1800,
        "total": 60130,
    }
    assert all(isinstance(value, int) for value in breakdown.values())


@pytest.mark.parametrize("weight", [0.1, 1, 333.3, 12345.67, 99999])
def test_cost_total_matches_sum_of_lines(weight):
    breakdown = dict(cost_breakdown(weight))
    total = breakdown.pop("total")
    assert total == sum(breakdown.values())


def test_insurance_rounds_half_up():
    # (15000 + 10) * 0.05 = 750.5
    assert cost_breakdown(10 / 2.8 - 1e-9)["weight"] == 10
    assert cost_breakdown(10 / 2.8 - 1e-9)["insurance"] == 751


def test_shipping_cost_payload(context):
    result = shipping_cost(SHIPPING_ARGS, context)
    json = result.json
    assert json["equipment"] == "TRANSFORMER"
    assert json["route"] == {"origin": "BUSAN", "destination": "JEBEL ALI"}
    assert json["weight_kg"] == 12000
    assert json["incoterm"] == {"valid": True, "code": "DAP", "reason": "OK"}
    assert json["breakdown_usd"]["total"] == 60130
    assert result.text == "💰 Cost $60,130  ($15,000 base / $33,600 weight / $4,500 hvdc / $2,430 ins)"


def test_shipping_cost_defaults_to_cfr(context):
    args = {key: value for key, value in SHIPPING_ARGS.items() if key != "incoterm"}
    assert shipping_cost(args, context).json["incoterm"]["code"] == "CFR"


def test_shipping_cost_empty_incoterm_is_missing(context):
    args = dict(SHIPPING_ARGS, incoterm="")
    assert shipping_cost(args, context).json["incoterm"]["reason"] == "MISSING"


@pytest.mark.parametrize(
    "override",
    [{"weight": 0}, {"weight": -5}, {"weight": "heavy"}, {"origin_port": ""}, {"equipment_type": None}],
)
def test_shipping_cost_bad_input(context, override):
    with pytest.raises(LogisticsError) as excinfo:
        shipping_cost(dict(SHIPPING_ARGS, **override), context)
    assert excinfo.value.code is ErrorCode.BAD_INPUT


@pytest.mark.parametrize("weight", [1e308, 10**400])
def test_shipping_cost_huge_weight_is_bad_input(weight):
    envelope = dispatch_tool_call(build_registry(), "calculate_hvdc_shipping_cost", dict(SHIPPING_ARGS, weight=weight))
    assert envelope_json(envelope)["code"] == "BAD_INPUT"


# --- ETA prediction ----------------------------------------------------------

def test_predict_eta(context):
    result = predict_eta({"origin": "BUSAN", "destination": "JEBEL ALI", "weight": 12000}, context)
    json = result.json
    assert json["route"] == {"origin": "BUSAN", "destination": "JEBEL ALI"}
    assert json["cargo_weight_kg"] == 12000
    assert json["eta_days"] == 7
    assert json["confidence"] == 0.83
    assert json["drivers"] == {"weather": "LOW", "port_congestion": "LOW", "customs_days": "3-4"}
    assert json["kpi_targets"] == {"on_time_rate": 0.93, "risk": "MEDIUM"}
    assert result.text == "🚢 ETA 7d (conf 83%)  weather:low / congestion:low / customs:3-4d"


def test_predict_eta_fractional_weight(context):
    json = predict_eta({"origin": "BUSAN", "destination": "JEBEL ALI", "weight": 12.5}, context).json
    assert json["eta_days"] == 10
    assert json["confidence"] == 0.86
    assert json["drivers"]["weather"] == "MODERATE"
    assert json["drivers"]["port_congestion"] == "MEDIUM"
    assert json["kpi_targets"]["risk"] == "LOW"


def test_integral_weight_seeds_like_an_integer(context):
    as_int = predict_eta({"origin": "A", "destination": "B", "weight": 500}, context).json
    as_float = predict_eta({"origin": "A", "destination": "B", "weight": 500.0}, context).json
    assert as_int == as_float


def test_predict_requires_route(context):
    with pytest.raises(LogisticsError) as excinfo:
        predict_eta({"origin": "BUSAN", "weight": 10}, context)
    assert excinfo.value.message == "destination required"


# --- weather tie -------------------------------------------------------------

def test_weather_tie_plan(context):
    result = weather_tie({"route": "BUSAN-JEBEL ALI", "departure_date": "2025-09-01"}, context)
    json = result.json
    assert json["departure_utc"] == "2025-09-01T00:00:00.000Z"
    assert json["weather"] == {"storm_risk": 0.15, "sea_state_m": "2-3", "wind_kt": "12-18"}
    assert json["recommendation"] == "PROCEED"
    assert json["optimal_window_days"] == 3
    assert result.text == "🌤️ Weather-tie: LOW risk, 3-day optimal window from T+1"


def test_weather_tie_bad_date_is_not_bad_input(context):
    with pytest.raises(LogisticsError) as excinfo:
        weather_tie({"route": "BUSAN-JEBEL ALI", "departure_date": "next tuesday"}, context)
    assert excinfo.value.code is ErrorCode.INVALID_DATE


def test_weather_tie_bad_date_reaches_the_envelope(context):
    envelope = dispatch_tool_call(
        build_registry(), "logi_master_weather_tie", {"route": "R", "departure_date": "2025-13-45"}, context
    )
    assert envelope_json(envelope)["code"] == "INVALID_DATE"


def test_weather_tie_requires_route(context):
    with pytest.raises(LogisticsError) as excinfo:
        weather_tie({"departure_date": "2025-09-01"}, context)
    assert excinfo.value.code is ErrorCode.BAD_INPUT


# --- idempotence -------------------------------------------------------------

@pytest.mark.parametrize(
    "name, args",
    [
        ("health_ping", {"echo": "ping"}),
        ("logi_master_invoice_audit", {"invoice_path": "AE1234567.pdf", "incoterm": "FOB", "hs_code": "853710"}),
        ("check_container_status", {"container_id": "MSCU1234567"}),
        ("calculate_hvdc_shipping_cost", SHIPPING_ARGS),
        ("logi_master_predict", {"origin": "ULSAN", "destination": "KHALIFA", "weight": 480.5}),
        ("logi_master_weather_tie", {"route": "ULSAN-KHALIFA", "departure_date": "2025-10-02T08:00:00Z"}),
    ],
)
def test_repeated_calls_are_identical(context, name, args):
    registry = build_registry()
    first = registry.run(name, dict(args), context)
    second = registry.run(name, dict(args), context)
    assert first.json == second.json
    assert first.text == second.text
    assert first.json["ok"] is True


def test_weather_tie_departure_out_of_range_after_shift(context):
    envelope = dispatch_tool_call(
        build_registry(),
        "logi_master_weather_tie",
        {"route": "R", "departure_date": "0001-01-01T00:00:00+01:00"},
        context,
    )
    assert envelope_json(envelope)["code"] == "INVALID_DATE"
