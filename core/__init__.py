# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic of the logistics MCP server:
# validators, reference data, the ZERO guard, the tool registry, the
# response envelopes and the six tool handlers.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, FastAPI or Google ADK.  Every
#   module here can be imported and tested with no server running and no
#   network access.
# =============================================================================
