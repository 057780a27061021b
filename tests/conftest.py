import json
from typing import Any

import pytest
from jwcrypto import jwk

from oidc_client.models.http import HTTPRequest, HTTPResponse

ISSUER = "https://provider.example.com"


class FakeTransport:
    """Transport stub serving canned responses by URL and recording requests."""

    def __init__(self):
        self.requests: list[HTTPRequest] = []
        self._responses: dict[str, HTTPResponse] = {}

    def respond(
        self,
        url: str,
        status_code: int = 200,
        payload: Any = None,
        body: bytes = b"",
        headers: tuple[tuple[str, str], ...] = (),
    ) -> None:
        if payload is not None:
            body = json.dumps(payload).encode("utf-8")
        self._responses[url] = HTTPResponse(
            status_code=status_code, headers=headers, body=body
        )

    async def __call__(self, request: HTTPRequest) -> HTTPResponse:
        self.requests.append(request)
        return self._responses[request.url]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def provider_document() -> dict[str, Any]:
    return {
        "issuer": ISSUER,
        "authorization_endpoint": f"{ISSUER}/authorize",
        "token_endpoint": f"{ISSUER}/token",
        "jwks_uri": f"{ISSUER}/jwks",
        "registration_endpoint": f"{ISSUER}/register",
        "response_types_supported": ["code", "id_token"],
        "subject_types_supported": ["public"],
        "id_token_signing_alg_values_supported": ["ES256"],
    }


@pytest.fixture
def key_set() -> dict[str, Any]:
    keys = jwk.JWKSet()
    keys.add(jwk.JWK.generate(kty="EC", crv="P-256", kid="signing-key"))
    return json.loads(keys.export(private_keys=False))
