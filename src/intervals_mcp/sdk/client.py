"""
Intervals.icu HTTP Client.

Handles HTTP transport, authentication and error translation.
All endpoint-specific logic lives in the sibling modules (athlete, events, etc.).
"""

import logging
from typing import Any, Dict, Optional

import requests

from intervals_mcp.sdk.exceptions import IntervalsAPIError
from intervals_mcp.sdk.types import API_KEY_USERNAME, API_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class IntervalsClient:
    """
    Intervals.icu HTTP transport, scoped to one athlete.

    Holds only configuration (athlete id, API key, base URL, timeout), so a
    single instance can serve concurrent callers and several instances can
    coexist.
    """

    def __init__(
        self,
        athlete_id: str,
        api_key: str,
        base_url: str = API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if not athlete_id:
            raise ValueError("athlete_id is required")
        if not api_key:
            raise ValueError("api_key is required")

        self._athlete_id = athlete_id
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

        self._session = requests.Session()
        self._session.auth = (API_KEY_USERNAME, api_key)
        self._session.headers.update({"Accept": "application/json"})

    @property
    def athlete_id(self) -> str:
        return self._athlete_id

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def athlete_path(self, *parts: Any) -> str:
        """Build a path scoped to the configured athlete, e.g. athlete/i123/events/42."""
        return "/".join(["athlete", self._athlete_id, *(str(p) for p in parts)])

    def make_request(
        self,
        method: str,
        path: str,
        operation: str,
        params: Dict = None,
        json_data: Any = None,
    ) -> Any:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET/POST/PUT/DELETE)
            path: API path relative to the base URL (e.g. "athlete/i123/events")
            operation: Logical operation name, reported in errors
            params: Query parameters
            json_data: JSON body data

        Returns:
            Decoded JSON body, or None when the response has no body

        Raises:
            IntervalsAPIError: On a non-2xx response, a network failure or
                a body that is not valid JSON
        """
        url = f"{self._base_url}/{path}"
        logger.debug("%s %s (%s)", method.upper(), path, operation)

        try:
            response = self._session.request(
                method.upper(),
                url,
                params=params,
                json=json_data,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            raise self._translate_error(e, operation) from e
        except requests.RequestException as e:
            logger.warning("%s failed: %s", operation, e)
            raise IntervalsAPIError(operation, None, str(e)) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            # e.g. an HTML page served by a proxy with a 200 status
            logger.warning("%s returned a non-JSON body: %s", operation, e)
            raise IntervalsAPIError(
                operation, response.status_code, f"Invalid JSON response: {e}"
            ) from e

    @staticmethod
    def _translate_error(error: requests.HTTPError, operation: str) -> IntervalsAPIError:
        """Turn an HTTPError into an IntervalsAPIError carrying the remote message."""
        response = error.response
        status = response.status_code if response is not None else None
        message = str(error)

        if response is not None:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                remote_message = body.get("error") or body.get("message")
                if remote_message:
                    message = str(remote_message)

        logger.warning("%s failed with status %s: %s", operation, status, message)
        return IntervalsAPIError(operation, status, message)
