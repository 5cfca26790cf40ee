"""Shared async JSON request helper for the API clients."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for a non-2xx response or a transport failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def http_error_message(status_code: int) -> str:
    return f"HTTP error! status: {status_code}"


class JsonHttpClient:
    """
    Sends JSON requests relative to base_url.

    token_getter, when given, supplies a Bearer token per request. With
    envelope_errors, the "message" of a JSON error body becomes the ApiError
    message; otherwise only the status code is reported.
    transport is passed to httpx (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        token_getter: Callable[[], str | None] | None = None,
        envelope_errors: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token_getter = token_getter
        self.envelope_errors = envelope_errors
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.token_getter() if self.token_getter else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Return the decoded JSON body (or text for non-JSON responses)."""
        url = f"{self.base_url}{endpoint}"
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    params=params,
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            logger.error("API request failed: %s %s: %s", method, url, e)
            raise ApiError(str(e) or type(e).__name__) from e

        content_type = response.headers.get("content-type", "")
        data: Any
        if "application/json" in content_type:
            data = response.json()
        else:
            data = response.text

        if not response.is_success:
            message = http_error_message(response.status_code)
            if self.envelope_errors and isinstance(data, dict) and data.get("message"):
                message = data["message"]
            logger.error("API request failed: %s %s: %s", method, url, message)
            raise ApiError(message, status_code=response.status_code)
        return data

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("POST", endpoint, json=json)

    async def put(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("PUT", endpoint, json=json)

    async def patch(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("PATCH", endpoint, json=json)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)
