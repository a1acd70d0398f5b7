"""Base client module for vendor REST API calls."""

import logging
from typing import Any

from atlassian.rest_client import AtlassianRestAPI
from requests import Response

from .exceptions import VendorApiError

logger = logging.getLogger("mcp-jira-confluence")


class VendorClient:
    """Thin wrapper issuing exactly one request per call against a vendor API.

    Subclasses build the underlying ``atlassian-python-api`` object, which
    carries the base URL, the JSON content type and the credential in its
    ``requests`` session.
    """

    service_name = "Atlassian"

    def __init__(self, api: AtlassianRestAPI) -> None:
        self.api = api

    def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """Issue a GET request and return the decoded JSON body."""
        response = self.api.get(path, params=params or None, advanced_mode=True)
        return self._handle_response("GET", path, response)

    def post(
        self,
        path: str,
        data: dict[str, Any],
        params: dict[str, str] | None = None,
    ) -> Any:
        """Issue a POST request with a JSON body and return the decoded JSON body."""
        response = self.api.post(
            path, data=data, params=params or None, advanced_mode=True
        )
        return self._handle_response("POST", path, response)

    def _handle_response(self, method: str, path: str, response: Response) -> Any:
        """Raise on a non-2xx status, otherwise decode the body.

        Raises:
            VendorApiError: If the vendor answered with a non-2xx status
        """
        if not response.ok:
            logger.debug(
                f"{self.service_name} {method} {path} failed with {response.status_code}"
            )
            raise VendorApiError(
                self.service_name,
                response.status_code,
                response.reason,
                response.text,
            )
        return response.json()
