"""
Shared test fixtures for the Jira and Confluence adapters.

Vendor clients are built from real configuration objects; only the
underlying ``atlassian-python-api`` object is replaced, so request
building and response handling run unmodified.
"""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
from requests import Response

from mcp_jira_confluence.confluence import ConfluenceClient, ConfluenceConfig
from mcp_jira_confluence.jira import JiraClient, JiraConfig


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


def make_response(
    status_code: int = 200, body: Any = None, reason: str | None = None
) -> Response:
    """Build a ``requests.Response`` carrying ``body``.

    Dicts and lists are encoded as JSON; strings are sent as is.
    """
    response = Response()
    response.status_code = status_code
    response.reason = reason or ("OK" if status_code < 400 else "Error")
    if isinstance(body, (dict, list)):
        content = json.dumps(body)
    else:
        content = body or ""
    response._content = content.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def response_factory():
    """Factory for vendor responses, see ``make_response``."""
    return make_response


@pytest.fixture
def jira_config():
    """Standard JiraConfig for tests."""
    return JiraConfig(
        url="https://test.atlassian.net",
        username="test@example.com",
        api_token="test_token",
    )


@pytest.fixture
def confluence_config():
    """Standard ConfluenceConfig for tests."""
    return ConfluenceConfig(
        url="https://confluence.example.com/rest/api",
        personal_token="test_pat",
    )


@pytest.fixture
def jira_client(jira_config):
    """JiraClient whose atlassian API object is a mock."""
    client = JiraClient(config=jira_config)
    client.api = MagicMock()
    return client


@pytest.fixture
def confluence_client(confluence_config):
    """ConfluenceClient whose atlassian API object is a mock."""
    client = ConfluenceClient(config=confluence_config)
    client.api = MagicMock()
    return client
