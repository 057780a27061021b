"""HTTP transport backed by httpx."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Self

import httpx

from oidc_client.models.errors import TransportError
from oidc_client.models.http import HTTPRequest, HTTPResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Async transport sending requests through an ``httpx.AsyncClient``.

    Non-2xx responses are returned as data. Connection, timeout and protocol
    failures are raised as TransportError.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        verify: bool = True,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the transport.

        Args:
            timeout: HTTP request timeout in seconds
            verify: Verify TLS certificates
            client: Preconfigured client to use instead of creating one; the
                caller keeps ownership of it
        """
        self.timeout = timeout
        self._owns_client = client is None
        self._http_client = client or httpx.AsyncClient(
            timeout=timeout, verify=verify
        )

    async def __call__(self, request: HTTPRequest) -> HTTPResponse:
        try:
            response = await self._http_client.request(
                request.method,
                request.url,
                headers=list(request.headers),
                content=request.body,
            )
        except httpx.HTTPError as e:
            raise TransportError(
                f"HTTP error during {request.method} {request.url}: {e}"
            ) from e

        return HTTPResponse(
            status_code=response.status_code,
            headers=tuple(response.headers.multi_items()),
            body=response.content,
        )

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
        return None
