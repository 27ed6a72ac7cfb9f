# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
httpx based transport for the panel REST API.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .base import HTTP_METHODS, HttpResponse, HttpStatusError, TransportError

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    HttpTransport implementation backed by ``httpx.AsyncClient``.

    One instance owns one connection pool for one API scope. The client is
    created lazily so a transport can be constructed outside an event loop.

    Args:
        base_url: Scope root, e.g. ``https://panel.example.com/api/application``
        api_key: Bearer token sent with every request
        timeout: Request timeout in seconds
        user_agent: Value for the User-Agent header
        verify_ssl: Whether to verify TLS certificates
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        user_agent: str = "pterolink",
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": user_agent,
        }
        self._verify_ssl = verify_ssl
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers,
                timeout=self.timeout,
                verify=self._verify_ssl,
                transport=self._transport,
            )
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, str | int] | None = None,
    ) -> HttpResponse:
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        try:
            response = await self._get_client().request(
                method,
                path,
                json=dict(body) if body is not None else None,
                params=dict(params) if params else None,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"{type(e).__name__}: {e}", cause=e) from e

        data = _decode_body(response)
        headers = {k.lower(): v for k, v in response.headers.items()}

        if not response.is_success:
            raise HttpStatusError(response.status_code, data, headers)

        return HttpResponse(status=response.status_code, data=data, headers=headers)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _decode_body(response: httpx.Response) -> Any:
    """Decode a response body; empty -> None, non-JSON -> {"message": text}."""
    if not response.content:
        return None
    try:
        return response.json()
    except json.JSONDecodeError:
        logger.debug(f"Non-JSON response body from {response.request.url}")
        return {"message": response.text}


__all__ = ["HttpxTransport"]
