"""StudentVue SOAP API exposed as MCP tools."""

from __future__ import annotations

__version__ = "0.1.0"

from studentvue_mcp.client import StudentVueClient
from studentvue_mcp.config import StudentVueConfig
from studentvue_mcp.exceptions import (
    ConfigurationError,
    SoapParseError,
    StudentVueError,
    TransportError,
)
from studentvue_mcp.operations import SoapRequest

__all__ = [
    "__version__",
    "ConfigurationError",
    "SoapParseError",
    "SoapRequest",
    "StudentVueClient",
    "StudentVueConfig",
    "StudentVueError",
    "TransportError",
]
