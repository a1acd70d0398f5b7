"""Tests for the low-level MCP server wiring."""

import os
from contextlib import contextmanager
from unittest.mock import MagicMock, patch

import pytest
from mcp.shared.context import RequestContext
from mcp.shared.exceptions import McpError
from mcp.shared.session import BaseSession
from mcp.types import (
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolRequestParams,
    ListToolsRequest,
)

from mcp_jira_confluence.servers.base import AppContext
from mcp_jira_confluence.servers.confluence import (
    STARTED_MESSAGE,
    confluence_registry,
    create_confluence_server,
)
from mcp_jira_confluence.servers.jira import create_jira_server, jira_registry


@contextmanager
def mock_request_context(app_context):
    """Set the request context variable the low-level server reads."""
    from mcp.server.lowlevel.server import request_ctx

    context = RequestContext(
        request_id="test-request-id",
        meta=None,
        session=MagicMock(spec=BaseSession),
        lifespan_context=app_context,
    )
    token = request_ctx.set(context)
    try:
        yield
    finally:
        request_ctx.reset(token)


def call_request(name, arguments=None):
    return CallToolRequest(
        method="tools/call",
        params=CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.fixture
def jira_app(jira_client):
    return create_jira_server(jira_client)


@pytest.fixture
def jira_context(jira_client):
    return AppContext(client=jira_client, registry=jira_registry)


@pytest.mark.anyio
class TestJiraServer:
    async def test_list_tools(self, jira_app):
        handler = jira_app.request_handlers[ListToolsRequest]

        with patch.dict(os.environ, {"READ_ONLY_MODE": "false"}):
            result = await handler(ListToolsRequest(method="tools/list"))

        assert [tool.name for tool in result.root.tools] == [
            "jql_search",
            "get_issue",
            "log_work",
        ]

    async def test_list_tools_read_only(self, jira_app):
        handler = jira_app.request_handlers[ListToolsRequest]

        with patch.dict(os.environ, {"READ_ONLY_MODE": "true"}):
            result = await handler(ListToolsRequest(method="tools/list"))

        assert [tool.name for tool in result.root.tools] == ["jql_search", "get_issue"]

    async def test_call_tool_returns_tool_result(
        self, jira_app, jira_context, jira_client, response_factory
    ):
        jira_client.api.get.return_value = response_factory(200, {"key": "TEST-1"})
        handler = jira_app.request_handlers[CallToolRequest]

        with mock_request_context(jira_context):
            result = await handler(call_request("get_issue", {"issueIdOrKey": "TEST-1"}))

        assert result.root.isError is False
        assert result.root.content[0].text == '{\n  "key": "TEST-1"\n}'

    async def test_call_tool_vendor_failure_is_tool_error(
        self, jira_app, jira_context, jira_client, response_factory
    ):
        jira_client.api.post.return_value = response_factory(
            401, "Unauthorized", reason="Unauthorized"
        )
        handler = jira_app.request_handlers[CallToolRequest]

        with mock_request_context(jira_context):
            result = await handler(call_request("jql_search", {"jql": "x = y"}))

        assert result.root.isError is True
        assert result.root.content[0].text == (
            "Error: Jira API Error: 401 Unauthorized - Unauthorized"
        )

    async def test_unknown_tool_is_protocol_error(self, jira_app, jira_context):
        handler = jira_app.request_handlers[CallToolRequest]

        with mock_request_context(jira_context):
            with pytest.raises(McpError) as exc:
                await handler(call_request("confluence.search", {"cql": "x"}))

        assert exc.value.error.code == METHOD_NOT_FOUND
        assert exc.value.error.message == "Tool not found: confluence.search"

    async def test_lifespan_yields_context(self, jira_app, jira_client):
        async with jira_app.lifespan(jira_app) as ctx:
            assert isinstance(ctx, AppContext)
            assert ctx.client is jira_client
            assert ctx.registry is jira_registry


@pytest.mark.anyio
class TestConfluenceServer:
    async def test_lifespan_reports_start_on_stderr(self, confluence_client, capsys):
        app = create_confluence_server(confluence_client)

        async with app.lifespan(app) as ctx:
            assert ctx.registry is confluence_registry

        captured = capsys.readouterr()
        assert STARTED_MESSAGE in captured.err
        assert STARTED_MESSAGE not in captured.out

    async def test_server_identity(self, confluence_client):
        app = create_confluence_server(confluence_client)

        options = app.create_initialization_options()

        assert options.server_name == "Confluence MCP"
        assert options.server_version == "0.1.0"

    async def test_jira_server_identity(self, jira_client):
        options = create_jira_server(jira_client).create_initialization_options()

        assert options.server_name == "jira-mcp"
        assert options.server_version == "1.0.0"
