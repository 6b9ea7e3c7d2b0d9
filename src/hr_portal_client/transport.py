"""HTTP transport used by the request gateway.

Transport-level problems (DNS, refused connections, protocol errors) surface
as exceptions; every completed exchange surfaces as an ``httpx.Response``
regardless of status.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

import httpx


class HttpTransportProtocol(Protocol):
    """Protocol for the generic request function behind the gateway."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: httpx.Headers,
        content: bytes | None = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and return the fully read response."""
        ...


class HttpxTransport:
    """Transport implementation over a shared httpx AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize the transport.

        Args:
            client: The underlying httpx AsyncClient to use
        """
        self._client = client

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: httpx.Headers,
        content: bytes | None = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        return await self._client.request(
            method,
            url,
            headers=headers,
            content=content,
            data=data or None,
            files=files or None,
        )
