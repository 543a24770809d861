"""Shared pytest fixtures for studentvue-mcp tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from studentvue_mcp.client import StudentVueClient
from studentvue_mcp.config import StudentVueConfig
from studentvue_mcp.tools import ToolDispatcher

PORTAL_URL = "https://portal.example-district.org"


def soap_body(payload: str, multi_web: bool = False) -> str:
    """Wrap an escaped payload the way the portal does."""
    wrapper = "ProcessWebServiceRequestMultiWeb" if multi_web else "ProcessWebServiceRequest"
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">'
        f'<soap:Body><{wrapper}Response xmlns="http://edupoint.com/webservices/">'
        f"<{wrapper}Result>{payload}</{wrapper}Result>"
        f"</{wrapper}Response></soap:Body></soap:Envelope>"
    )


def make_response(text: str, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    return response


@pytest.fixture
def config() -> StudentVueConfig:
    """Config for a test account."""
    return StudentVueConfig(
        portal_url=PORTAL_URL + "/",
        username="student01",
        password="s3cret&<pw>",
    )


@pytest.fixture
def session() -> MagicMock:
    """Stand-in for requests.Session returning an empty result by default.

    Yields:
        MagicMock whose ``post`` returns a 200 response wrapping ``&lt;Ok/&gt;``.
    """
    mock_session = MagicMock()
    mock_session.headers = {}
    mock_session.post.return_value = make_response(soap_body("&lt;Ok/&gt;"))
    return mock_session


@pytest.fixture
def client(config: StudentVueConfig, session: MagicMock) -> StudentVueClient:
    return StudentVueClient(config, session=session)


@pytest.fixture
def dispatcher(client: StudentVueClient) -> ToolDispatcher:
    return ToolDispatcher(client)
