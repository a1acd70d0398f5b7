"""Helpers for building vendor query strings."""

from collections.abc import Iterable
from typing import Any


def compact_params(params: dict[str, Any]) -> dict[str, str]:
    """Drop absent values and render the rest as query-string values.

    ``None`` means absent and is dropped. Booleans become ``true``/``false``.
    Other values are rendered with ``str``.

    Args:
        params: Candidate query parameters

    Returns:
        Parameters safe to hand to the HTTP client
    """
    compacted: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            compacted[key] = "true" if value else "false"
        else:
            compacted[key] = str(value)
    return compacted


def join_list(values: Iterable[str] | None) -> str | None:
    """Comma-join a list argument, treating an empty list as absent."""
    if not values:
        return None
    return ",".join(values)
