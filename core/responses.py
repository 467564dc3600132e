# =============================================================================
# core/responses.py  —  Response Envelopes & the Dispatch Boundary
# =============================================================================
#
# ENVELOPES:
#   Success →  {"content": [{"type": "json", "json": {...}},
#                           {"type": "text", "text": "📦 ..."}]}
#   Failure →  {"content": [{"type": "json", "json": {"ok": False,
#                                                     "code": "BAD_INPUT",
#                                                     ...}}],
#               "isError": True}
#
#   The text block only appears when there is a summary to show.
#
# THE DISPATCH BOUNDARY:
#   dispatch_tool_call() is the ONE place where exceptions become error
#   envelopes.  Handlers and the registry raise; this function catches,
#   picks the code (UNEXPECTED when the exception has none), stamps a
#   timestamp, logs it and returns the envelope.  No traceback ever reaches
#   the agent.
# =============================================================================

from typing import Any, Optional

from core.errors import ErrorCode, LogisticsError
from core.models import CallContext
from core.registry import ToolRegistry


def ok_response(json: dict[str, Any], text: Optional[str] = None) -> dict[str, Any]:
    content: list[dict[str, Any]] = [{"type": "json", "json": json}]
    if text:
        content.append({"type": "text", "text": text})
    return {"content": content}


def error_response(code, **details: Any) -> dict[str, Any]:
    code_value = code.value if isinstance(code, ErrorCode) else str(code)
    return {
        "content": [{"type": "json", "json": {"ok": False, "code": code_value, **details}}],
        "isError": True,
    }


def is_error(envelope: dict[str, Any]) -> bool:
    return bool(envelope.get("isError"))


def envelope_json(envelope: dict[str, Any]) -> dict[str, Any]:
    """The JSON payload of an envelope (success or failure)."""
    return envelope["content"][0]["json"]


def envelope_text(envelope: dict[str, Any]) -> str:
    """The summary line of a success envelope, or "" when there is none."""
    for block in envelope["content"]:
        if block.get("type") == "text":
            return block["text"]
    return ""


def dispatch_tool_call(
    registry: ToolRegistry,
    name: str,
    arguments: Optional[dict[str, Any]] = None,
    context: Optional[CallContext] = None,
) -> dict[str, Any]:
    """Run a tool by name and always return an envelope, never raise."""
    context = context or CallContext()
    context.logger.info(f"Call {name}")
    try:
        result = registry.run(name, arguments or {}, context)
    except Exception as exc:
        if isinstance(exc, LogisticsError):
            code, message, details = exc.code, exc.message, exc.details
        else:
            code, message, details = ErrorCode.UNEXPECTED, str(exc) or "Unknown error", {}
        context.logger.error(f"Call failed: {code.value} {message}")
        payload: dict[str, Any] = {"ts": context.now(), "message": message}
        if details:
            payload["details"] = details
        return error_response(code, **payload)
    return ok_response(result.json, result.text)
