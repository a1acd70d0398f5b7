"""Jira API module for the Jira MCP adapter."""

from .client import JiraClient
from .config import JiraConfig

__all__ = ["JiraClient", "JiraConfig"]
