"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass

from ..utils.env import is_env_ssl_verify
from ..utils.urls import is_atlassian_cloud_url


@dataclass
class JiraConfig:
    """Jira API configuration.

    The Jira adapter authenticates with Basic auth built from the account
    email and an API token.
    """

    url: str  # Base URL of the Jira instance
    username: str  # Account email
    api_token: str  # API token used as the Basic auth password
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
        """
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables.

        Raises:
            ValueError: If any required environment variable is missing
        """
        url = os.getenv("JIRA_INSTANCE_URL")
        username = os.getenv("JIRA_USER_EMAIL")
        api_token = os.getenv("JIRA_API_KEY")

        if not url or not username or not api_token:
            error_msg = (
                "JIRA_INSTANCE_URL, JIRA_USER_EMAIL, and JIRA_API_KEY "
                "must be set in the environment."
            )
            raise ValueError(error_msg)

        return cls(
            url=url.rstrip("/"),
            username=username,
            api_token=api_token,
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
        )
