"""JSON Web Key Set decoding backed by jwcrypto."""

from __future__ import annotations

from jwcrypto.common import JWException
from jwcrypto.jwk import JWKSet


def decode_key_set(body: bytes) -> JWKSet:
    """Decode a JWKS document (RFC 7517 Section 5).

    Raises:
        ValueError: If the body is not a valid key set
    """
    try:
        return JWKSet.from_json(body.decode("utf-8"))
    except (JWException, TypeError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid key set: {e}") from e
