# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the transport layer between the agent host and core/.
#
#   mcp_server.py   FastMCP stdio server: the six tools, two prompts and the
#                   logistics://tools resource
#   http_server.py  FastAPI liveness side-channel (/healthz, /)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain business logic (that's in core/)
#   - They do NOT catch domain errors themselves; core.responses'
#     dispatch_tool_call is the single place errors become envelopes
# =============================================================================
