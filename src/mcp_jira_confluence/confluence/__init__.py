"""Confluence API module for the Confluence MCP adapter."""

from .client import ConfluenceClient
from .config import ConfluenceConfig

__all__ = ["ConfluenceClient", "ConfluenceConfig"]
