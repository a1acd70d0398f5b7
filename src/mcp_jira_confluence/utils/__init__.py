"""
Utility functions for the Jira and Confluence MCP adapters.
"""

from .date import jira_timestamp_now
from .env import is_env_ssl_verify, is_read_only_mode
from .logging import log_config_param, mask_sensitive
from .params import compact_params, join_list
from .urls import is_atlassian_cloud_url

__all__ = [
    "compact_params",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "is_read_only_mode",
    "jira_timestamp_now",
    "join_list",
    "log_config_param",
    "mask_sensitive",
]
