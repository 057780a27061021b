"""Transport abstraction for provider requests.

A transport sends one HTTPRequest and returns one HTTPResponse. It may do so
synchronously or return an awaitable; orchestrators accept both, so callers
pick the execution model.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable
from typing import Protocol

from oidc_client.models.errors import ErrorResponse, TransportError
from oidc_client.models.http import HTTPRequest, HTTPResponse

logger = logging.getLogger(__name__)

TRANSPORT_ERROR = "transport_error"


class Transport(Protocol):
    """Anything callable with a request that yields a response.

    Transports must return non-2xx responses as data. Failures to obtain any
    response should be raised as TransportError; other exceptions propagate
    to the caller untouched. Timeouts, retries and TLS belong here, never in
    the orchestrators.
    """

    def __call__(
        self, request: HTTPRequest
    ) -> HTTPResponse | Awaitable[HTTPResponse]: ...


async def send(
    transport: Transport, request: HTTPRequest
) -> HTTPResponse | ErrorResponse:
    """Invoke a transport exactly once.

    Returns:
        The response, or an ErrorResponse if the transport raised TransportError
    """
    logger.debug(f"{request.method} {request.url}")
    try:
        result = transport(request)
        if inspect.isawaitable(result):
            result = await result
    except TransportError as e:
        logger.warning(f"Transport failed for {request.method} {request.url}: {e}")
        return ErrorResponse(code=TRANSPORT_ERROR, description=str(e))

    logger.debug(f"{request.method} {request.url} -> {result.status_code}")
    return result
