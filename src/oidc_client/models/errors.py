"""Error values and exception hierarchy for OpenID Connect client operations.

Orchestrators return failures as the frozen dataclass variants defined here
so callers can branch on every failure kind with ``match`` or ``isinstance``.
Each variant converts to the matching exception for callers that would
rather raise.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, Field


class ErrorResponse(BaseModel):
    """Error object returned by a provider, or synthesized by the parser.

    Accepts the OAuth 2.0 wire names (``error``, ``error_description``) as well
    as ``code`` and ``description``.
    """

    code: str = Field(validation_alias=AliasChoices("error", "code"))
    description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("error_description", "description"),
    )

    def __str__(self) -> str:
        if self.description:
            return f"{self.code}: {self.description}"
        return self.code


class OIDCClientError(Exception):
    """Base exception for all OpenID Connect client errors."""

    pass


class ProviderError(OIDCClientError):
    """Raised when a provider answered with an error or an undecodable body."""

    def __init__(self, error: ErrorResponse):
        super().__init__(f"Provider request failed: {error}")
        self.error = error


class InvalidAddressError(OIDCClientError):
    """Raised when an address cannot be turned into a request."""

    def __init__(self, address: str):
        super().__init__(f"Invalid provider address: {address!r}")
        self.address = address


class RegistrationUnsupportedError(OIDCClientError):
    """Raised when the provider has no usable registration endpoint."""

    def __init__(self) -> None:
        super().__init__("Provider does not support dynamic client registration")


class TransportError(OIDCClientError):
    """Raised by a transport when no HTTP response could be obtained.

    Orchestrators turn it into a provider failure instead of propagating it.
    """

    pass


@dataclass(frozen=True)
class ProviderFailure:
    """The provider responded, but with an error or an undecodable payload."""

    error: ErrorResponse

    def exception(self) -> ProviderError:
        return ProviderError(self.error)


@dataclass(frozen=True)
class InvalidAddress:
    """An address could not be resolved into a usable request target."""

    address: str

    def exception(self) -> InvalidAddressError:
        return InvalidAddressError(self.address)


@dataclass(frozen=True)
class RegistrationUnsupported:
    """The provider does not advertise a usable registration endpoint.

    Covers both a missing endpoint and one whose address cannot be used.
    """

    def exception(self) -> RegistrationUnsupportedError:
        return RegistrationUnsupportedError()


DiscoveryError = ProviderFailure | InvalidAddress
RegistrationError = RegistrationUnsupported | ProviderFailure
