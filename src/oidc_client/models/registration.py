"""Client registration models for OpenID Connect Dynamic Client Registration.

Contains client metadata (RFC 7591 / OIDC Registration 1.0) and the
provider's registration response.
"""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field


class ClientMetadata(BaseModel):
    """Client metadata sent to a registration endpoint.

    Extra fields are allowed and serialized as-is, which is how
    provider-specific extensions are carried.
    """

    model_config = ConfigDict(extra="allow")

    redirect_uris: list[str] = Field(min_length=1)

    client_name: str | None = None
    client_uri: str | None = None
    logo_uri: str | None = None
    scope: str | None = None
    contacts: list[str] | None = None
    tos_uri: str | None = None
    policy_uri: str | None = None
    jwks_uri: str | None = None
    application_type: str | None = None
    subject_type: str | None = None
    id_token_signed_response_alg: str | None = None
    default_max_age: int | None = None
    post_logout_redirect_uris: list[str] | None = None

    token_endpoint_auth_method: str = "client_secret_basic"
    grant_types: list[str] = Field(default=["authorization_code"])
    response_types: list[str] = Field(default=["code"])


class ClientMetadataResponse(ClientMetadata):
    """Registration response: the registered metadata plus provider-assigned fields."""

    # Providers may leave unchanged metadata out of the response
    redirect_uris: list[str] = Field(default_factory=list)

    client_id: str
    client_secret: str | None = None  # None for public clients
    registration_access_token: str | None = None
    registration_client_uri: str | None = None
    client_id_issued_at: int | None = None
    client_secret_expires_at: int | None = None

    def is_expired(self) -> bool:
        """Check if the client secret has expired (0 means it never expires)."""
        if not self.client_secret_expires_at:
            return False
        return time.time() >= self.client_secret_expires_at
