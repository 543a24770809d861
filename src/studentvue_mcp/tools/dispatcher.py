"""Tool dispatcher for routing tool calls to the StudentVue client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from studentvue_mcp.config import REQUIRED_ENV
from studentvue_mcp.exceptions import StudentVueError
from studentvue_mcp.tools.exceptions import ToolError, ToolNotFoundError
from studentvue_mcp.tools.operations import TOOL_OPERATIONS
from studentvue_mcp.tools.result import ToolResult, format_error
from studentvue_mcp.tools.schemas import get_all_tool_schemas

LOGGER = logging.getLogger(__name__)

if TYPE_CHECKING:
    from studentvue_mcp.client import StudentVueClient

CONFIG_ERROR_MESSAGE = (
    "StudentVue client not initialized. Please set "
    f"{', '.join(REQUIRED_ENV[:-1])}, and {REQUIRED_ENV[-1]} environment variables."
)


class ToolDispatcher:
    """Route tool calls to client operations."""

    def __init__(self, client: StudentVueClient | None) -> None:
        """
        Initialize dispatcher.

        Args:
            client: Configured client, or None when credentials are missing.
                Without a client every call reports a configuration error.
        """
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def dispatch(self, tool_name: str, arguments: dict | None = None) -> ToolResult:
        """
        Execute a tool call.

        Args:
            tool_name: Name from the tool catalogue.
            arguments: Tool arguments (may be None).

        Returns: ToolResult with the payload text, or an error-flagged result.
        """
        LOGGER.info("Tool call: %s", tool_name)

        if self._client is None:
            LOGGER.warning("Tool error: %s code=CONFIG_ERROR", tool_name)
            return ToolResult(
                tool_name=tool_name,
                success=False,
                text=format_error(CONFIG_ERROR_MESSAGE),
                error=CONFIG_ERROR_MESSAGE,
            )

        try:
            operation = TOOL_OPERATIONS.get(tool_name)
            if operation is None:
                raise ToolNotFoundError(f"Unknown tool: {tool_name}")

            request = operation.build(arguments or {})
            payload = self._client.send(request)

        except (ToolError, StudentVueError) as e:
            LOGGER.warning("Tool error: %s %s: %s", tool_name, type(e).__name__, e)
            return self._error(tool_name, str(e))

        except Exception as e:
            LOGGER.error("Tool exception: %s: %s", tool_name, e)
            return self._error(tool_name, str(e))

        LOGGER.debug("Tool success: %s (%d chars)", tool_name, len(payload))
        return ToolResult(tool_name=tool_name, success=True, text=payload)

    def get_tool_definitions(self) -> list[dict]:
        """Return MCP tool schemas."""
        return get_all_tool_schemas()

    @staticmethod
    def _error(tool_name: str, message: str) -> ToolResult:
        return ToolResult(
            tool_name=tool_name,
            success=False,
            text=format_error(message),
            error=message,
        )
