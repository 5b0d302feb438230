"""Tool registry — registration, lookup, and listing of tool configs."""

from __future__ import annotations

from typing import Any

from dissect.core.errors import DuplicateToolError, ToolNotFoundError
from dissect.tools.config import ToolConfig


class ToolRegistry:
    """Registry of tool configurations keyed by tool id.

    Enforces unique ids and preserves registration order for listings.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolConfig[Any, Any]] = {}

    def register(self, tool: ToolConfig[Any, Any]) -> None:
        """Register a tool. Raises DuplicateToolError if the id is already taken."""
        if tool.id in self._tools:
            raise DuplicateToolError(f"Tool '{tool.id}' is already registered")
        self._tools[tool.id] = tool

    def lookup(self, tool_id: str) -> ToolConfig[Any, Any]:
        """Look up a tool by id. Raises ToolNotFoundError if not found."""
        if tool_id not in self._tools:
            raise ToolNotFoundError(f"Tool '{tool_id}' is not registered")
        return self._tools[tool_id]

    def list_tools(self) -> list[ToolConfig[Any, Any]]:
        """Return all registered tools."""
        return list(self._tools.values())

    def has(self, tool_id: str) -> bool:
        """Check if a tool is registered."""
        return tool_id in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def default_registry() -> ToolRegistry:
    """Return a fresh registry holding every built-in tool."""
    from dissect.tools.library import BUILTIN_TOOLS

    registry = ToolRegistry()
    for tool in BUILTIN_TOOLS:
        registry.register(tool)
    return registry
