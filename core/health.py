# =============================================================================
# core/health.py  —  health_ping (readiness probe)
# =============================================================================
# The cheapest possible tool call.  The agent host uses it to check the
# server is alive before doing real work; it always succeeds.
# =============================================================================

from core.formatting import clamp_string
from core.models import CallContext, ToolResult
from core.registry import LogisticsTool


def health_ping(args: dict, context: CallContext) -> ToolResult:
    echo = clamp_string(args.get("echo"))
    text = f"✅ health ping {f'echo:{echo}' if echo else ''}".strip()
    return ToolResult(json={"ok": True, "ts": context.now(), "echo": echo}, text=text)


HEALTH_PING_TOOL = LogisticsTool(
    name="health_ping",
    description="MCP health readiness probe",
    input_schema={
        "type": "object",
        "properties": {
            "echo": {"type": "string"},
        },
    },
    handler=health_ping,
)
