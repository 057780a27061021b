"""Request building primitives.

Every request leaving this package goes through ``build_request``, which forces
the ``https`` scheme and asks for JSON. ``add_header`` is the single place
headers are set.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Any
from urllib.parse import SplitResult, urlsplit, urlunsplit

from pydantic import BaseModel

from oidc_client.models.errors import InvalidAddress
from oidc_client.models.http import HTTPRequest

logger = logging.getLogger(__name__)

WELL_KNOWN_PATH = "/.well-known/openid-configuration"

Address = str | SplitResult


def parse_address(address: Address) -> SplitResult | None:
    """Parse text into an address; None if it has no scheme or host."""
    try:
        if isinstance(address, SplitResult):
            parsed = address
        else:
            parsed = urlsplit(address.strip())
        # Accessing the port validates it
        parsed.port
    except ValueError:
        return None

    if not parsed.scheme or not parsed.hostname:
        return None
    return parsed


def uri_to_text(address: Address) -> str:
    """Render an address as text."""
    if isinstance(address, SplitResult):
        return urlunsplit(address)
    return address


def force_https(address: SplitResult) -> SplitResult:
    return address._replace(scheme="https")


def well_known_path(address: SplitResult) -> SplitResult:
    """Point a bare provider address at the discovery document.

    Addresses with an empty or ``/`` path get the well-known path; any other
    path is kept so providers can publish discovery elsewhere.
    """
    if address.path in ("", "/"):
        return address._replace(path=WELL_KNOWN_PATH)
    return address


def add_header(name: str, value: str, request: HTTPRequest) -> HTTPRequest:
    """Set a header, replacing any existing one with the same name.

    The new header goes first; the remaining headers keep their order.
    """
    wanted = name.lower()
    kept = tuple(
        (header_name, header_value)
        for header_name, header_value in request.headers
        if header_name.lower() != wanted
    )
    return replace(request, headers=((name, value),) + kept)


def build_request(address: Address) -> HTTPRequest | InvalidAddress:
    """Build a GET request for an address.

    Args:
        address: Address text or an already parsed address

    Returns:
        Request with an ``https`` URL and ``Accept: application/json``, or
        InvalidAddress if the address has no usable scheme and host
    """
    parsed = parse_address(address)
    if parsed is None:
        logger.debug(f"Rejecting unusable address: {uri_to_text(address)!r}")
        return InvalidAddress(uri_to_text(address))

    request = HTTPRequest(method="GET", url=urlunsplit(force_https(parsed)))
    return add_header("Accept", "application/json", request)


def build_json_post(body: Any, request: HTTPRequest) -> HTTPRequest:
    """Turn a request into a JSON POST carrying ``body``.

    Pydantic models are dumped in JSON mode with unset optional fields left out.
    """
    if isinstance(body, BaseModel):
        payload = body.model_dump(exclude_none=True, mode="json")
    else:
        payload = body

    request = replace(
        request, method="POST", body=json.dumps(payload).encode("utf-8")
    )
    return add_header("Content-Type", "application/json", request)


def bearer_authorization(token: str, request: HTTPRequest) -> HTTPRequest:
    """Authorize a request with a bearer token (RFC 6750)."""
    return add_header("Authorization", f"Bearer {token}", request)
