"""Provider response parsing.

Turns a raw response into a decoded value with its cache expiration, or into
the ErrorResponse describing why that was not possible.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from oidc_client.models.errors import ErrorResponse
from oidc_client.models.http import HTTPResponse
from oidc_client.primitives.caching import cache_until

logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[bytes], T]

INVALID_RESPONSE = "invalid response from server"

# Bytes of the body kept when describing an undecodable response
ERROR_BODY_LIMIT = 1024


def _invalid_response(response: HTTPResponse) -> ErrorResponse:
    description = response.body[:ERROR_BODY_LIMIT].decode("utf-8", errors="replace")
    return ErrorResponse(code=INVALID_RESPONSE, description=description)


def parse_response(
    response: HTTPResponse, decode: Decoder[T]
) -> tuple[T, datetime | None] | ErrorResponse:
    """Decode a provider response.

    Args:
        response: Response returned by the transport
        decode: Decoder for the expected payload; must raise ValueError on
            failure (pydantic's ``model_validate_json`` does)

    Returns:
        The decoded value and its cache expiration for 2xx responses. Otherwise
        the provider's own error object, or a synthesized one carrying the
        start of the body when the payload cannot be decoded.
    """
    if response.is_success:
        try:
            value = decode(response.body)
        except ValueError as e:
            logger.debug(f"Undecodable {response.status_code} response: {e}")
            return _invalid_response(response)
        return value, cache_until(response.headers)

    try:
        error = ErrorResponse.model_validate_json(response.body)
    except ValueError:
        logger.debug(f"Non-JSON error response with status {response.status_code}")
        return _invalid_response(response)

    logger.debug(f"Provider error response {response.status_code}: {error}")
    return error
