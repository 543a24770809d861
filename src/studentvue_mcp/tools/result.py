"""Tool result dataclass."""

from __future__ import annotations

from dataclasses import dataclass

ERROR_PREFIX = "Error: "


@dataclass
class ToolResult:
    """Result from a tool execution."""

    tool_name: str
    success: bool
    text: str  # Payload on success, "Error: ..." on failure
    error: str | None = None


def format_error(message: str) -> str:
    """Format an error message as tool output text."""
    return f"{ERROR_PREFIX}{message}"
