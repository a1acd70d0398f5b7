"""Base client module for Jira API interactions."""

import logging

from atlassian import Jira

from ..client import VendorClient
from .config import JiraConfig

logger = logging.getLogger("mcp-jira-confluence.jira")


class JiraClient(VendorClient):
    """Client for the Jira REST API v2, authenticated with Basic auth."""

    service_name = "Jira"

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from
                environment variables.

        Raises:
            ValueError: If configuration is missing from the environment.
        """
        self.config = config or JiraConfig.from_env()

        logger.debug(
            f"Initializing Jira client with Basic auth. URL: {self.config.url}, "
            f"Username: {self.config.username}"
        )
        super().__init__(
            Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )
        )
