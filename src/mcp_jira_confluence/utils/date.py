"""Utility functions for date operations."""

from datetime import datetime, timezone


def jira_timestamp_now() -> str:
    """Current UTC time in the form Jira expects for worklog ``started``.

    Millisecond precision with an explicit ``+0000`` offset, e.g.
    ``2024-03-01T09:15:42.123+0000``.
    """
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}+0000"
