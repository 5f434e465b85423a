"""
HTTP client for the storefront script endpoint.

The backend is a spreadsheet-backed script deployment that answers every
request on a single URL. The ``action`` parameter selects the operation.
"""
import json
import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base error for storefront API calls."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ApiTimeoutError(ApiError):
    """The endpoint did not answer within the timeout."""


class ApiConnectionError(ApiError):
    """The request never reached the endpoint or the connection dropped."""


class ApiResponseError(ApiError):
    """The endpoint answered with an HTTP error status."""


class OpaqueResponseError(ApiError):
    """The endpoint answered 2xx but the body was not readable JSON."""


class StorefrontApiClient:
    """Thin ``requests`` wrapper with JSON encoding and error classification."""

    HEADERS = {
        'Accept': 'application/json',
        'Content-Type': 'application/json',
    }

    def __init__(self, base_url: str, timeout: float = 15):
        self.base_url = base_url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(self.HEADERS)

    def get(self, action: str, params: Dict[str, Any] = None, timeout: float = None) -> Any:
        """GET ``?action=<action>`` and return the decoded body."""
        query = {'action': action}
        query.update(params or {})
        return self._request('GET', params=query, timeout=timeout)

    def post(self, action: str, payload: Dict[str, Any], timeout: float = None) -> Any:
        """POST a JSON body with ``action`` merged into it."""
        body = dict(payload)
        body['action'] = action
        return self._request('POST', data=json.dumps(body, ensure_ascii=False), timeout=timeout)

    def _request(self, method: str, timeout: float = None, **kwargs) -> Any:
        try:
            response = self.session.request(
                method,
                self.base_url,
                timeout=timeout or self.timeout,
                **kwargs,
            )
        except requests.Timeout as e:
            logger.error(f"{method} {self.base_url} timed out: {e}")
            raise ApiTimeoutError(f"Request timed out after {timeout or self.timeout}s") from e
        except requests.RequestException as e:
            logger.error(f"{method} {self.base_url} failed: {e}")
            raise ApiConnectionError(str(e)) from e

        if response.status_code >= 400:
            logger.error(f"{method} {self.base_url} returned HTTP {response.status_code}")
            raise ApiResponseError(
                f"HTTP error {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"{method} {self.base_url} returned an unreadable body")
            raise OpaqueResponseError(
                "Response body is not JSON",
                status_code=response.status_code,
            ) from e
