"""
2PeekMe API client.

Every endpoint answers with a JSON envelope ``{"success": bool, "result": ...}``.
Requests are sent once: there is no timeout, retry or backoff.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""

import logging
from typing import Any, Optional

import httpx

from peekme_cli.constants import API_BASE

logger = logging.getLogger(__name__)


class PeekMeError(Exception):
    """Base class for errors raised while talking to the API."""


class ApiError(PeekMeError):
    """The API answered with ``success: false``."""

    def __init__(self, result: Any):
        self.result = result
        super().__init__(str(result))


class TransportError(PeekMeError):
    """The request failed or the response was not a JSON envelope."""


class PeekMeClient:
    """
    Thin wrapper around ``httpx.Client`` for the 2PeekMe endpoints.

    Parameters:
        base_url: API base URL, with a trailing slash
        timeout: Request timeout in seconds, None to wait forever
        transport: Optional httpx transport (used by tests)
    """

    def __init__(
        self,
        base_url: str = API_BASE,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PeekMeClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def request(self, endpoint: str, params: Optional[dict] = None) -> dict:
        """
        POST to an endpoint with ``params`` sent in the query string.

        The API expects the parameters in the URL even though the method is
        POST, so no request body is sent.

        Parameters:
            endpoint: Endpoint path relative to the base URL (e.g. "key/info")
            params: Query parameters

        Returns:
            The full response envelope

        Raises:
            ApiError: If the envelope reports ``success: false``
            TransportError: On network failures or malformed responses
        """
        logger.debug("POST %s%s", self.base_url, endpoint)
        response = self._send("POST", endpoint, params)
        return self._unwrap(response)

    def generate_key(self) -> str:
        """
        Ask the API for a brand new key.

        Returns:
            The generated key

        Raises:
            ApiError: If the API refuses to generate a key
            TransportError: On network failures or malformed responses
        """
        logger.debug("GET %skey/get", self.base_url)
        envelope = self._unwrap(self._send("GET", "key/get", None))
        key = envelope.get("result")
        if not key:
            raise ApiError("Failed to generate API key.")
        return key

    def _send(self, method: str, endpoint: str, params: Optional[dict]) -> httpx.Response:
        try:
            return self._client.request(method, endpoint, params=params)
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

    @staticmethod
    def _unwrap(response: httpx.Response) -> dict:
        try:
            envelope = response.json()
        except ValueError:
            envelope = None

        if isinstance(envelope, dict) and "success" in envelope:
            if envelope["success"]:
                return envelope
            raise ApiError(envelope.get("result") or "Request was not successful")

        if response.is_error:
            raise TransportError(
                f"HTTP {response.status_code} from {_redacted_url(response)}"
            )
        raise TransportError(f"Unexpected response from {_redacted_url(response)}")


def _redacted_url(response: httpx.Response) -> str:
    # The query string carries the API key
    url = response.request.url
    return f"{url.scheme}://{url.netloc.decode('ascii')}{url.path}"


def create_client(base_url: str = API_BASE) -> PeekMeClient:
    """
    Create a client for the 2PeekMe API.

    Parameters:
        base_url: API base URL

    Returns:
        Configured client, to be closed by the caller
    """
    client = PeekMeClient(base_url=base_url)
    logger.debug("2PeekMe client instantiated for %s", base_url)
    return client
