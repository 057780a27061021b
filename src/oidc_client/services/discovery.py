"""OpenID Connect provider discovery service.

Implements OpenID Connect Discovery 1.0: fetch the provider's metadata
document, then the JSON Web Key Set it references.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TypeVar

from jwcrypto.jwk import JWKSet

from oidc_client.models.discovery import Provider, ProviderMetadata
from oidc_client.models.errors import (
    DiscoveryError,
    ErrorResponse,
    InvalidAddress,
    ProviderFailure,
)
from oidc_client.models.http import HTTPRequest
from oidc_client.primitives.caching import combine_expirations
from oidc_client.primitives.keys import decode_key_set
from oidc_client.primitives.requests import (
    Address,
    build_request,
    parse_address,
    uri_to_text,
    well_known_path,
)
from oidc_client.primitives.responses import Decoder, parse_response
from oidc_client.transport.base import Transport, send

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OIDCDiscovery:
    """Handles OpenID Connect provider discovery.

    Implements the two-step discovery process:
    1. Provider metadata from the discovery address
    2. Key set from the metadata's ``jwks_uri``

    Each step issues exactly one transport call and steps never run
    concurrently. Every result comes with the instant until which it may be
    cached, or None when it must not be cached.
    """

    def __init__(self, transport: Transport):
        """Initialize discovery.

        Args:
            transport: Transport used for every request
        """
        self.transport = transport

    async def discover(
        self, discovery_address: Address
    ) -> tuple[ProviderMetadata, datetime | None] | DiscoveryError:
        """Fetch the provider's discovery document.

        If the address has an empty or ``/`` path it is rewritten to the
        well-known discovery path.

        Args:
            discovery_address: Provider issuer or discovery document address

        Returns:
            Discovery document and its cache expiration, or the failure
        """
        parsed = parse_address(discovery_address)
        if parsed is None:
            return InvalidAddress(uri_to_text(discovery_address))

        request = build_request(well_known_path(parsed))
        if isinstance(request, InvalidAddress):
            return request

        logger.debug(f"Fetching provider metadata from: {request.url}")
        return await self._fetch(request, ProviderMetadata.model_validate_json)

    async def fetch_keys(
        self, metadata: ProviderMetadata
    ) -> tuple[JWKSet, datetime | None] | DiscoveryError:
        """Fetch the provider's key set from its ``jwks_uri``.

        Args:
            metadata: The provider's discovery document

        Returns:
            Key set and its cache expiration, or the failure
        """
        request = build_request(metadata.jwks_uri)
        if isinstance(request, InvalidAddress):
            return request

        logger.debug(f"Fetching provider key set from: {request.url}")
        return await self._fetch(request, decode_key_set)

    async def discover_and_fetch_keys(
        self, discovery_address: Address
    ) -> tuple[Provider, datetime | None] | DiscoveryError:
        """Fetch a provider's discovery document and key set.

        Stops at the first failure. The returned expiration is the earlier of
        the two, and None unless both responses were cacheable.

        Args:
            discovery_address: Provider issuer or discovery document address

        Returns:
            Provider record and combined cache expiration, or the failure
        """
        discovered = await self.discover(discovery_address)
        if isinstance(discovered, (ProviderFailure, InvalidAddress)):
            return discovered
        metadata, metadata_expiration = discovered

        fetched = await self.fetch_keys(metadata)
        if isinstance(fetched, (ProviderFailure, InvalidAddress)):
            return fetched
        keys, keys_expiration = fetched

        logger.debug(f"Discovered provider {metadata.issuer}")
        return (
            Provider(discovery=metadata, keys=keys),
            combine_expirations(metadata_expiration, keys_expiration),
        )

    async def _fetch(
        self, request: HTTPRequest, decode: Decoder[T]
    ) -> tuple[T, datetime | None] | ProviderFailure:
        response = await send(self.transport, request)
        if isinstance(response, ErrorResponse):
            return ProviderFailure(response)

        result = parse_response(response, decode)
        if isinstance(result, ErrorResponse):
            logger.warning(f"Discovery request to {request.url} failed: {result}")
            return ProviderFailure(result)
        return result
