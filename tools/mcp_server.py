# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Advertises every logistics tool to the agent host over MCP.  Each tool
#   here is a thin wrapper: it forwards its arguments to the registry via
#   dispatch_tool_call() and turns the resulting envelope into MCP content.
#
# HOW IT WORKS (the flow):
#   1. The agent host decides it needs information (e.g., container status)
#   2. It calls a tool by name via MCP (e.g., "check_container_status")
#   3. FastMCP routes the call to the decorated function below
#   4. The function dispatches into core/ (registry → handler)
#   5. Success: two text blocks come back: the JSON payload and the
#      one-line summary.  Failure: a ToolError carrying the JSON error
#      payload, which MCP flags as isError.
#
# TOOL NAMING CONVENTIONS:
#   The names are fixed by the agent-side playbooks that already call them
#   (logi_master_*, check_*, calculate_*).  Don't rename them.
#   All tools are read-only and idempotent: same arguments, same payload
#   (apart from the "ts" timestamp).
#
# ALSO SERVED:
#   - Two prompts from core/prompts.py (invoice_audit_summary, eta_explain)
#   - The resource logistics://tools, the registry's tool listing
#   - The HTTP side-channel (tools/http_server.py) on a background thread
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server   (or: hvdc-logistics-mcp)
#     b) From the demo agent, which spawns it via stdio transport
# =============================================================================

import json
import logging
import sys
from typing import Optional, Union

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import TextContent

# --- Import core logic ---
# Notice: we import from core/, never from agent/.
from core.catalog import build_registry
from core.config import AppConfig
from core.models import CallContext
from core.prompts import PROMPTS, get_prompt
from core.responses import dispatch_tool_call, envelope_json, envelope_text, is_error
from tools.http_server import create_http_app, start_http_server

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent via STDOUT.
# Anything we printed to stdout would corrupt the MCP JSON stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status/progress messages
#     - RED for error envelopes
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logging.basicConfig(
    level=AppConfig.LOG_LEVEL,
    format="%(asctime)s [MCP] %(name)s %(levelname)s %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger("logistics.server")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}")
    return result


def _log_failure(tool_name: str, payload: dict) -> None:
    logger.warning(f"{_RED}  ✗ {tool_name} failed: {payload.get('code')} {payload.get('message')}{_RESET}")


# =============================================================================
# Registry + FastMCP server instance
# =============================================================================
registry = build_registry()

mcp = FastMCP(
    AppConfig.SERVER_NAME,
    instructions=(
        "HVDC project logistics tools: invoice audit, container tracking, "
        "shipping cost, ETA prediction and weather-tied departure advice. "
        "All figures are deterministic placeholders, not live data."
    ),
)


def call_logistics_tool(tool_name: str, **arguments) -> list[TextContent]:
    """Dispatch one tool call and convert the envelope to MCP content.

    A fresh CallContext is built for every call.  Error envelopes are
    raised as ToolError so the MCP result is flagged isError.
    """
    _log_request(tool_name, **arguments)
    args = {key: value for key, value in arguments.items() if value is not None}
    envelope = dispatch_tool_call(registry, tool_name, args, CallContext())
    payload = envelope_json(envelope)

    if is_error(envelope):
        _log_failure(tool_name, payload)
        raise ToolError(json.dumps(payload, ensure_ascii=False))

    _log_response(tool_name, payload)
    content = [TextContent(type="text", text=json.dumps(payload, ensure_ascii=False))]
    summary = envelope_text(envelope)
    if summary:
        _log_status(summary)
        content.append(TextContent(type="text", text=summary))
    return content


# Wrapper parameters are optional and loosely typed so that missing or
# mistyped arguments reach the validators in core/ and come back as
# BAD_INPUT payloads.


# =============================================================================
# TOOL 1: health_ping
# =============================================================================
@mcp.tool()
def health_ping(echo: Optional[str] = None):
    """Readiness probe. Always succeeds and echoes `echo` back.

    WHEN TO CALL THIS: Before a batch of logistics calls, to confirm the
    server is up.
    """
    return call_logistics_tool("health_ping", echo=echo)


# =============================================================================
# TOOL 2: logi_master_invoice_audit
# =============================================================================
# The only tool guarded by the ZERO rule: a high hs-risk aborts the audit
# with HS_RISK_STOP instead of returning a report.
# =============================================================================
@mcp.tool()
def logi_master_invoice_audit(
    invoice_path: Optional[str] = None,
    incoterm: Optional[str] = None,
    hs_code: Optional[str] = None,
):
    """Audit a supplier invoice (Incoterm / HS code / DEM-DET readiness).

    Args:
        invoice_path: Path or file name of the invoice, e.g.
            "HVDC-INV-123.pdf".  The invoice number is read from it.
        incoterm: Trade term on the invoice (e.g. "CFR", "DAP").
        hs_code: HS commodity code (e.g. "850490" or "8504.90").

    Returns:
        JSON with invoice_no, OCR/hs-risk metrics, Incoterm and HS-code
        validations, the USD amount breakdown and the next workflow steps,
        followed by a one-line summary.  Unknown Incoterm/HS codes are
        flagged in the report, not treated as errors.
    """
    return call_logistics_tool(
        "logi_master_invoice_audit",
        invoice_path=invoice_path, incoterm=incoterm, hs_code=hs_code,
    )


# =============================================================================
# TOOL 3: check_container_status
# =============================================================================
@mcp.tool()
def check_container_status(container_id: Optional[str] = None):
    """Tracking snapshot for a container.

    Args:
        container_id: ISO 6346 id, 4 letters + 7 digits (e.g. "MSCU1234567").
            Lowercase is accepted.

    Returns:
        JSON with status, progress_pct (50-90), port/terminal, vessel name and
        voyage, ETA and cargo condition flags, plus a summary line.
        BAD_INPUT if the id isn't ISO 6346 shaped.
    """
    return call_logistics_tool("check_container_status", container_id=container_id)


# =============================================================================
# TOOL 4: calculate_hvdc_shipping_cost
# =============================================================================
@mcp.tool()
def calculate_hvdc_shipping_cost(
    equipment_type: Optional[str] = None,
    weight: Union[float, str, None] = None,
    origin_port: Optional[str] = None,
    destination_port: Optional[str] = None,
    incoterm: Optional[str] = None,
):
    """Estimate the port-to-port cost of shipping HVDC equipment.

    Args:
        equipment_type: What is shipped (e.g. "Transformer").
        weight: Cargo weight in kg, greater than zero.
        origin_port: Port of loading (e.g. "BUSAN").
        destination_port: Port of discharge (e.g. "JEBEL ALI").
        incoterm: Trade term; CFR when omitted.

    Returns:
        JSON with the USD breakdown (base, weight, hvdc_handling, insurance,
        demurrage/detention reserves, total) and the Incoterm validation.
    """
    return call_logistics_tool(
        "calculate_hvdc_shipping_cost",
        equipment_type=equipment_type, weight=weight,
        origin_port=origin_port, destination_port=destination_port,
        incoterm=incoterm,
    )


# =============================================================================
# TOOL 5: logi_master_predict
# =============================================================================
@mcp.tool()
def logi_master_predict(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    weight: Union[float, str, None] = None,
):
    """Predict ETA (days) and KPI risk for a route and cargo weight.

    Returns eta_days (7-13), a confidence score, the weather / port
    congestion / customs drivers behind the estimate and KPI targets.
    """
    return call_logistics_tool(
        "logi_master_predict",
        origin=origin, destination=destination, weight=weight,
    )


# =============================================================================
# TOOL 6: logi_master_weather_tie
# =============================================================================
@mcp.tool()
def logi_master_weather_tie(route: Optional[str] = None, departure_date: Optional[str] = None):
    """Weather-tied go/no-go advice for a departure.

    Args:
        route: Free-text route, e.g. "BUSAN-JEBEL ALI".
        departure_date: ISO-8601 date or datetime, e.g. "2025-09-01".
            An unparseable date fails with INVALID_DATE.
    """
    return call_logistics_tool("logi_master_weather_tie", route=route, departure_date=departure_date)


# =============================================================================
# Prompts & resources
# =============================================================================
def _prompt_renderer(name: str):
    def render() -> str:
        return "\n".join(message.text for message in get_prompt(name).messages)
    return render


for _prompt in PROMPTS:
    mcp.prompt(name=_prompt.name, description=_prompt.description)(_prompt_renderer(_prompt.name))


@mcp.resource("logistics://tools")
def tool_catalog() -> str:
    """The registered tools with their input schemas, in registration order."""
    return json.dumps(registry.list(), ensure_ascii=False)


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    if AppConfig.HTTP_ENABLED:
        start_http_server(create_http_app(registry))
    logger.info(f"{AppConfig.DISPLAY_NAME} (v{AppConfig.VERSION}) ready with {len(registry)} tools")
    mcp.run()


if __name__ == "__main__":
    main()
