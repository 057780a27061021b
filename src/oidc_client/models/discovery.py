"""Discovery-related models for OpenID Connect providers.

Contains the OpenID Provider Metadata document (OpenID Connect Discovery 1.0)
and the composed Provider record.
"""

from __future__ import annotations

from dataclasses import dataclass

from jwcrypto.jwk import JWKSet
from pydantic import BaseModel, ConfigDict, Field


class ProviderMetadata(BaseModel):
    """OpenID Provider Metadata (OpenID Connect Discovery 1.0, Section 3).

    Unknown members are kept so the document passes through untouched.
    """

    model_config = ConfigDict(extra="allow")

    # Required fields
    issuer: str
    authorization_endpoint: str
    jwks_uri: str

    # Dynamic registration (OpenID Connect Dynamic Client Registration 1.0)
    registration_endpoint: str | None = None

    # Optional but commonly used
    token_endpoint: str | None = None
    userinfo_endpoint: str | None = None
    end_session_endpoint: str | None = None
    scopes_supported: list[str] | None = None
    response_types_supported: list[str] = Field(default=["code"])
    response_modes_supported: list[str] | None = None
    grant_types_supported: list[str] = Field(
        default=["authorization_code", "implicit"]
    )
    subject_types_supported: list[str] = Field(default=["public"])
    id_token_signing_alg_values_supported: list[str] = Field(default=["RS256"])
    token_endpoint_auth_methods_supported: list[str] = Field(
        default=["client_secret_basic"]
    )
    claims_supported: list[str] | None = None
    code_challenge_methods_supported: list[str] | None = None


@dataclass(frozen=True)
class Provider:
    """A provider's discovery document together with its key set.

    Fetch the two individually when caching them, since their expiration
    times can differ a lot.
    """

    discovery: ProviderMetadata
    keys: JWKSet
