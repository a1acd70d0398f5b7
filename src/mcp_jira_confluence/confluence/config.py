"""Configuration module for the Confluence client."""

import os
from dataclasses import dataclass

from ..utils.env import is_env_ssl_verify

DEFAULT_CONFLUENCE_BASE = "https://spaces.telenav.com:8443/rest/api"


@dataclass
class ConfluenceConfig:
    """Confluence API configuration.

    ``url`` is the REST API root (it already ends in ``/rest/api``) and
    requests authenticate with a personal access token sent as a Bearer
    token.
    """

    url: str  # REST API root for Confluence
    personal_token: str  # Personal access token (Bearer)
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Returns:
            ConfluenceConfig with values from environment variables

        Raises:
            ValueError: If the personal access token is missing
        """
        url = os.getenv("CONFLUENCE_BASE") or DEFAULT_CONFLUENCE_BASE
        personal_token = os.getenv("CONFLUENCE_PAT")
        if not personal_token:
            raise ValueError("Missing CONFLUENCE_PAT env var")

        return cls(
            url=url.rstrip("/"),
            personal_token=personal_token,
            ssl_verify=is_env_ssl_verify("CONFLUENCE_SSL_VERIFY"),
        )
