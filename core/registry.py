# =============================================================================
# core/registry.py  —  Tool Contract & Tool Registry
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the uniform contract every logistics operation implements, and
#   the registry that looks operations up by name.
#
#   LogisticsTool = {name, description, input_schema, handler}
#       handler(args: dict, context: CallContext) -> ToolResult
#
#   ToolRegistry  = name → LogisticsTool, in registration order
#
# POPULATED ONCE:
#   The registry is filled at startup from core/catalog.py and only read
#   afterwards.  Registering a name twice replaces the earlier tool; that
#   isn't expected to happen, so it isn't guarded against either.
#
# WHAT THE REGISTRY DOES NOT DO:
#   It does NOT catch handler errors.  A LogisticsError raised inside a
#   handler flows straight through run() to the dispatch boundary.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from core.errors import ErrorCode, LogisticsError
from core.models import CallContext, ToolResult

ToolHandler = Callable[[dict[str, Any], CallContext], ToolResult]


@dataclass(frozen=True)
class LogisticsTool:
    """One callable operation, as advertised to the agent host."""

    name: str                          # Unique tool name, e.g. "check_container_status"
    description: str                   # One line the LLM reads to decide WHEN to call it
    input_schema: dict[str, Any]       # JSON Schema of the accepted arguments
    handler: ToolHandler

    def to_schema(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }

    def execute(self, args: Optional[dict[str, Any]] = None, context: Optional[CallContext] = None) -> ToolResult:
        return self.handler(args or {}, context or CallContext())


class ToolRegistry:
    """Name → LogisticsTool lookup with ordered listing."""

    def __init__(self, tools: Iterable[LogisticsTool] = ()):
        self._tools: dict[str, LogisticsTool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: LogisticsTool) -> None:
        if not isinstance(tool, LogisticsTool):
            raise TypeError("ToolRegistry.register expects a LogisticsTool")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[LogisticsTool]:
        return self._tools.get(name)

    # names() must stay above list(): from there on `list` is the method.
    def names(self) -> list[str]:
        return list(self._tools)

    def list(self) -> list[dict[str, Any]]:
        """Descriptors of every registered tool, in registration order."""
        return [tool.to_schema() for tool in self._tools.values()]

    def run(
        self,
        name: str,
        args: Optional[dict[str, Any]] = None,
        context: Optional[CallContext] = None,
    ) -> ToolResult:
        tool = self.get(name)
        if tool is None:
            raise LogisticsError(ErrorCode.TOOL_NOT_FOUND, f"Unknown tool: {name}", {"name": name})
        return tool.execute(args, context)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools
