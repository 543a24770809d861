"""Tool layer for StudentVue operations.

This module provides:
- ToolDispatcher: Routes tool calls to the client
- ToolResult: Result dataclass for tool execution
- Tool exceptions for error handling
- MCP tool schemas
"""

from __future__ import annotations

from studentvue_mcp.tools.dispatcher import CONFIG_ERROR_MESSAGE, ToolDispatcher
from studentvue_mcp.tools.exceptions import (
    ToolError,
    ToolNotFoundError,
    ToolValidationError,
)
from studentvue_mcp.tools.operations import TOOL_OPERATIONS, ToolOperation
from studentvue_mcp.tools.result import ToolResult, format_error
from studentvue_mcp.tools.schemas import get_all_tool_schemas

__all__ = [
    "CONFIG_ERROR_MESSAGE",
    "TOOL_OPERATIONS",
    "ToolDispatcher",
    "ToolOperation",
    "ToolResult",
    "ToolError",
    "ToolNotFoundError",
    "ToolValidationError",
    "format_error",
    "get_all_tool_schemas",
]
