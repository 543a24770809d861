"""StudentVue client exceptions."""

from __future__ import annotations


class StudentVueError(Exception):
    """Base exception for StudentVue client operations."""


class ConfigurationError(StudentVueError):
    """Client configuration is missing or invalid."""


class TransportError(StudentVueError):
    """HTTP exchange with the portal failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class SoapParseError(StudentVueError):
    """Response did not contain a recognised result wrapper."""
