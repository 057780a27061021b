"""Transport-neutral HTTP request and response models.

Headers are kept as an ordered tuple of (name, value) pairs rather than a
mapping so that wire order survives. Header names compare case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass

Headers = tuple[tuple[str, str], ...]


def find_header(headers: Headers, name: str) -> str | None:
    """Return the first value whose header name matches ``name``."""
    wanted = name.lower()
    for header_name, value in headers:
        if header_name.lower() == wanted:
            return value
    return None


@dataclass(frozen=True)
class HTTPRequest:
    """Outbound request handed to a transport.

    Immutable; builders return modified copies.
    """

    method: str
    url: str
    headers: Headers = ()
    body: bytes | None = None

    def header(self, name: str) -> str | None:
        return find_header(self.headers, name)


@dataclass(frozen=True)
class HTTPResponse:
    """Response returned by a transport.

    Non-2xx responses are ordinary values, never exceptions.
    """

    status_code: int
    headers: Headers = ()
    body: bytes = b""

    def header(self, name: str) -> str | None:
        return find_header(self.headers, name)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
