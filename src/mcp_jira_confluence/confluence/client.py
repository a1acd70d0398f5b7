"""Base client module for Confluence API interactions."""

import logging

from atlassian import Confluence

from ..client import VendorClient
from .config import ConfluenceConfig

logger = logging.getLogger("mcp-jira-confluence.confluence")


class ConfluenceClient(VendorClient):
    """Client for the Confluence REST API, authenticated with a Bearer token."""

    service_name = "Confluence"

    def __init__(self, config: ConfluenceConfig | None = None) -> None:
        """Initialize the Confluence client with given or environment config.

        Args:
            config: Configuration for Confluence client. If None, will load from
                environment.

        Raises:
            ValueError: If the personal access token is missing
        """
        self.config = config or ConfluenceConfig.from_env()

        logger.debug(
            f"Initializing Confluence client with Token (PAT) auth. URL: {self.config.url}"
        )
        super().__init__(
            Confluence(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=False,
                verify_ssl=self.config.ssl_verify,
            )
        )
