"""OpenID Connect dynamic client registration service.

Implements OpenID Connect Dynamic Client Registration 1.0 (and RFC 7591)
to register clients with providers found through discovery.
"""

from __future__ import annotations

import logging

from oidc_client.models.discovery import ProviderMetadata
from oidc_client.models.errors import (
    ErrorResponse,
    InvalidAddress,
    ProviderFailure,
    RegistrationError,
    RegistrationUnsupported,
)
from oidc_client.models.registration import ClientMetadata, ClientMetadataResponse
from oidc_client.primitives.requests import (
    bearer_authorization,
    build_json_post,
    build_request,
)
from oidc_client.primitives.responses import parse_response
from oidc_client.transport.base import Transport, send

logger = logging.getLogger(__name__)


class OIDCRegistration:
    """Handles dynamic client registration against a discovered provider.

    A provider without a usable ``registration_endpoint`` is reported as
    unsupported before any request is made, whether the endpoint is missing
    or its address is malformed.
    """

    def __init__(self, transport: Transport):
        """Initialize registration.

        Args:
            transport: Transport used for the registration request
        """
        self.transport = transport

    async def register_client(
        self,
        metadata: ProviderMetadata,
        client_metadata: ClientMetadata,
        initial_access_token: str | None = None,
    ) -> ClientMetadataResponse | RegistrationError:
        """Register a new client with the provider.

        Args:
            metadata: The provider's discovery document
            client_metadata: Client metadata to register
            initial_access_token: Optional initial access token for protected
                registration endpoints

        Returns:
            The provider's registration response, or the failure
        """
        endpoint = metadata.registration_endpoint
        if endpoint is None:
            logger.debug(f"Provider {metadata.issuer} has no registration endpoint")
            return RegistrationUnsupported()

        request = build_request(endpoint)
        if isinstance(request, InvalidAddress):
            logger.debug(f"Unusable registration endpoint: {endpoint!r}")
            return RegistrationUnsupported()

        request = build_json_post(client_metadata, request)

        # RFC 7591 Section 3.1
        if initial_access_token:
            request = bearer_authorization(initial_access_token, request)

        logger.debug(f"Registering client at {request.url}")
        response = await send(self.transport, request)
        if isinstance(response, ErrorResponse):
            return ProviderFailure(response)

        result = parse_response(response, ClientMetadataResponse.model_validate_json)
        if isinstance(result, ErrorResponse):
            logger.warning(
                f"Client registration failed with {response.status_code}: {result}"
            )
            return ProviderFailure(result)

        registered, _ = result
        logger.info(
            f"Successfully registered client {registered.client_id} at {request.url}"
        )
        return registered
