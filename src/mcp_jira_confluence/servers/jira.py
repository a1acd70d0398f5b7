"""Jira MCP server."""

import logging

from mcp.server import Server

from ..jira.client import JiraClient
from ..jira.tools import JIRA_TOOLS
from ..utils.logging import log_config_param
from .base import create_server
from .registry import ToolRegistry

logger = logging.getLogger("mcp-jira-confluence.jira")

SERVER_NAME = "jira-mcp"
SERVER_VERSION = "1.0.0"

jira_registry = ToolRegistry("Jira", JIRA_TOOLS)


def create_jira_server(client: JiraClient) -> Server:
    """Build the Jira MCP server around an initialized client."""
    log_config_param(logger, "Jira", "URL", client.config.url)
    log_config_param(logger, "Jira", "Username", client.config.username)
    log_config_param(
        logger, "Jira", "API Token", client.config.api_token, sensitive=True
    )
    log_config_param(logger, "Jira", "SSL Verify", str(client.config.ssl_verify))

    return create_server(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        registry=jira_registry,
        client=client,
    )
