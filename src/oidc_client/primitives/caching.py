"""Cache expiration from HTTP response headers.

Computes the absolute instant until which a provider response may be cached,
using ``Cache-Control: max-age`` relative to ``Date`` and falling back to
``Expires``.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime

from oidc_client.models.http import Headers, find_header

# Zone names accepted at the end of an RFC 1123 date
HTTP_DATE_ZONES = ("GMT", "UTC")

# Bounds max-age to 999999 seconds
MAX_AGE_DIGITS = 6

_MAX_AGE_PATTERN = re.compile(r"max-age\D*(\d+)")


def parse_http_date(value: str | None) -> datetime | None:
    """Parse an RFC 1123 date such as ``Sun, 06 Nov 1994 08:49:37 GMT``."""
    if value is None:
        return None
    value = value.strip()
    if not value.endswith(HTTP_DATE_ZONES):
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed.utcoffset() != timedelta(0):
        return None
    return parsed.replace(tzinfo=timezone.utc)


def _max_age_seconds(cache_control: str) -> int | None:
    match = _MAX_AGE_PATTERN.search(cache_control)
    if not match:
        return None
    return int(match.group(1)[:MAX_AGE_DIGITS])


def cache_until(headers: Headers) -> datetime | None:
    """Calculate how long a response can be cached.

    ``max-age`` added to ``Date`` wins over ``Expires``. Without a usable
    ``Date`` header ``max-age`` is ignored. An instant earlier than the
    response's own ``Date`` means the response is already stale.

    Args:
        headers: Response headers

    Returns:
        Expiration instant in UTC, or None if the response must not be cached
    """
    date = parse_http_date(find_header(headers, "Date"))

    max_age: datetime | None = None
    cache_control = find_header(headers, "Cache-Control")
    if cache_control is not None and date is not None:
        seconds = _max_age_seconds(cache_control)
        if seconds is not None:
            try:
                max_age = date + timedelta(seconds=seconds)
            except OverflowError:
                max_age = None

    expires = parse_http_date(find_header(headers, "Expires"))

    expiration = max_age if max_age is not None else expires
    if expiration is not None and date is not None and expiration < date:
        return None
    return expiration


def combine_expirations(
    first: datetime | None, second: datetime | None
) -> datetime | None:
    """Combine two expirations into the earlier one.

    Both must be known; if either is None the combination is None too.
    """
    if first is None or second is None:
        return None
    return min(first, second)
