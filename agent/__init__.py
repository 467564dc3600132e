# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the demo Google ADK agent: an LLM-driven "logistics
# desk" that acts as the agent host for our MCP server.
#
# ARCHITECTURAL ROLE:
#   The agent decides WHICH tool to call and HOW to explain the result.  It
#   has no business logic of its own; it only reaches core/ through the MCP
#   server in tools/.  The server works without this package.
# =============================================================================
