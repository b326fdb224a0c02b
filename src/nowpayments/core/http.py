"""
HTTP transport for the NOWPayments REST API.

Wraps an ``httpx.AsyncClient``: joins endpoints onto the configured base URL,
attaches the API key, decodes JSON responses and turns failures into ApiError.
"""

from __future__ import annotations

from typing import Any

import httpx

from nowpayments.core.config import Config
from nowpayments.core.exceptions import ApiError
from nowpayments.core.logging import get_logger


def _decode_json(response: httpx.Response) -> Any:
    """Decode a response body, falling back to an empty dict."""
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {}
    return {} if data is None else data


class ApiTransport:
    """
    Issues requests against the NOWPayments API.

    Example:
        >>> transport = ApiTransport(Config(api_key="..."))
        >>> status = await transport.request("GET", "status")
        >>> await transport.close()
    """

    def __init__(self, config: Config, http_client: httpx.AsyncClient | None = None) -> None:
        """
        Args:
            config: SDK configuration
            http_client: Shared httpx client; the transport will not close it
        """
        self._config = config
        self._http_client = http_client
        self._owns_http_client = False
        self._logger = get_logger("http")

    @property
    def base_url(self) -> str:
        return self._config.api_base_url

    def default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._config.user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
            "x-api-key": self._config.api_key,
        }

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    self._config.request_timeout, connect=self._config.connect_timeout
                ),
                headers=self.default_headers(),
            )
            self._owns_http_client = True
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            ApiError: On a non-2xx response or a transport failure
        """
        client = self._get_client()
        url = self.build_url(endpoint)

        request_headers = self.default_headers()
        if headers:
            request_headers.update(headers)
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        self._logger.debug(f"{method} {url}")
        try:
            response = await client.request(
                method,
                url,
                params=params or None,
                json=json_body,
                headers=request_headers,
            )
        except httpx.HTTPError as e:
            self._logger.warning(f"{method} {url} failed: {e}")
            raise ApiError(f"HTTP request failed: {e}", status_code=0, url=url) from e

        if not response.is_success:
            self._raise_for_response(method, url, response)

        return _decode_json(response)

    def _raise_for_response(self, method: str, url: str, response: httpx.Response) -> None:
        data = _decode_json(response)
        if not isinstance(data, dict):
            data = {"errors": data}
        message = data.get("message") or f"HTTP {response.status_code} {response.reason_phrase}".strip()
        self._logger.warning(f"{method} {url} returned {response.status_code}: {message}")
        raise ApiError(str(message), status_code=response.status_code, response_data=data, url=url)
