"""Confluence MCP server."""

import logging

from mcp.server import Server

from ..confluence.client import ConfluenceClient
from ..confluence.tools import CONFLUENCE_TOOLS
from ..utils.logging import log_config_param
from .base import create_server
from .registry import ToolRegistry

logger = logging.getLogger("mcp-jira-confluence.confluence")

SERVER_NAME = "Confluence MCP"
SERVER_VERSION = "0.1.0"
STARTED_MESSAGE = "Confluence MCP server running on stdio"

confluence_registry = ToolRegistry("Confluence", CONFLUENCE_TOOLS)


def create_confluence_server(client: ConfluenceClient) -> Server:
    """Build the Confluence MCP server around an initialized client."""
    log_config_param(logger, "Confluence", "URL", client.config.url)
    log_config_param(
        logger,
        "Confluence",
        "Personal Token",
        client.config.personal_token,
        sensitive=True,
    )
    log_config_param(
        logger, "Confluence", "SSL Verify", str(client.config.ssl_verify)
    )

    return create_server(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        registry=confluence_registry,
        client=client,
        started_message=STARTED_MESSAGE,
    )
