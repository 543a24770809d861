"""Tool-specific exceptions."""

from __future__ import annotations


class ToolError(Exception):
    """Base exception for tool operations."""


class ToolNotFoundError(ToolError):
    """Tool name not recognized."""


class ToolValidationError(ToolError):
    """Tool arguments failed validation."""
