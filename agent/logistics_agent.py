# =============================================================================
# agent/logistics_agent.py  —  Google ADK Agent Configuration (demo host)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds a Google ADK agent that plays the "agent host" for our MCP
#   server.  It's a demo: the server itself doesn't need it, but it's the
#   quickest way to watch the tools being called by a real LLM.
#
#   ADK = orchestration (tool calling, sessions)
#   LiteLlm = the LLM connection (any provider; OpenRouter by default)
#   MCPToolset = the pipe to tools/mcp_server.py over stdio
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess (`python -m tools.mcp_server`)
#   from the project root and talks to it over stdin/stdout.  The HTTP
#   side-channel is switched off in that subprocess; the demo doesn't
#   need a port.
# =============================================================================

import os
from pathlib import Path
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_logistics_desk_prompt
from core.config import AppConfig

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def mcp_server_parameters() -> StdioServerParameters:
    """How to launch the logistics MCP server as a stdio subprocess."""
    env = dict(os.environ)
    env["LOGISTICS__HTTP_ENABLED"] = "false"
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        env=env,
        cwd=str(PROJECT_ROOT),
    )


def create_agent(model: Optional[str] = None) -> Agent:
    """Create the logistics desk agent.

    Args:
        model: LiteLlm model string, e.g. "openrouter/openai/gpt-4o-mini".
            Defaults to AppConfig.AGENT_MODEL.  The provider's API key is
            read from the environment by LiteLlm.

    Returns:
        A configured Google ADK Agent wired to the logistics MCP server.
    """
    mcp_tools = MCPToolset(connection_params=mcp_server_parameters())

    return Agent(
        name="hvdc_logistics_desk",
        model=LiteLlm(model=model or AppConfig.AGENT_MODEL),
        instruction=get_logistics_desk_prompt(),
        tools=[mcp_tools],
    )
