"""Secret sanitization for log output and error messages.

A webhook URL is its own credential: anyone holding the token path segment
can post to the channel. These helpers strip such tokens before text reaches
a log handler.

Examples:
    >>> sanitize_url("https://discord.com/api/webhooks/123/secret_token")
    'https://discord.com/api/webhooks/123/<REDACTED>'

    >>> sanitize_url("https://hooks.example.com/api/webhooks/123/secret_token")
    'https://hooks.example.com/api/webhooks/123/<REDACTED>'
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

REDACTED = "<REDACTED>"

# Any host serving the /api/webhooks/<id>/<token> layout, proxies included
_WEBHOOK_TOKEN_PATTERN = re.compile(
    r"(https?://[^/\s]+/api/webhooks/\d+/)([^/?#\s]+)",
    re.IGNORECASE,
)

_GENERIC_TOKEN_IN_QUERY = re.compile(
    r"([?&](?:token|api[-_]?key|auth|secret)=)([^&\s]+)",
    re.IGNORECASE,
)

_SENSITIVE_FIELD_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in [
        r".*token.*",
        r".*secret.*",
        r".*password.*",
        r".*webhook.*",
    ]
]


def is_sensitive_field(field_name: str) -> bool:
    """Check if a field name indicates sensitive data.

    Examples:
        >>> is_sensitive_field("webhook_url")
        True
        >>> is_sensitive_field("username")
        False
    """
    return any(pattern.match(field_name) for pattern in _SENSITIVE_FIELD_PATTERNS)


def sanitize_url(url: str) -> str:
    """Redact webhook tokens and token query parameters from a string.

    The URL structure (scheme, host, webhook id) is preserved so log lines
    remain useful for debugging.
    """
    if not url:
        return url
    sanitized = _WEBHOOK_TOKEN_PATTERN.sub(rf"\1{REDACTED}", url)
    return _GENERIC_TOKEN_IN_QUERY.sub(rf"\1{REDACTED}", sanitized)


def sanitize_value(value: object, *, field_name: str | None = None) -> object:
    """Recursively sanitize strings inside nested mappings and sequences.

    Args:
        value: The value to sanitize
        field_name: Optional field name; sensitive names are redacted outright

    Returns:
        Sanitized copy of ``value``
    """
    if field_name and is_sensitive_field(field_name):
        return REDACTED

    if isinstance(value, str):
        return sanitize_url(value)

    if value is None or isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, Mapping):
        return {str(key): sanitize_value(val, field_name=str(key)) for key, val in value.items()}  # pyright: ignore[reportUnknownVariableType]

    if isinstance(value, Sequence) and not isinstance(value, bytes):
        items = [sanitize_value(item) for item in value]  # pyright: ignore[reportUnknownVariableType]
        return tuple(items) if isinstance(value, tuple) else items

    return sanitize_url(str(value))


def sanitize_args(args: tuple[object, ...]) -> tuple[object, ...]:
    """Sanitize the ``args`` tuple of a log record."""
    return tuple(sanitize_value(arg) for arg in args)


def sanitize_exception(exc: BaseException) -> str:
    """Describe an exception with any embedded secrets removed.

    Examples:
        >>> sanitize_exception(ValueError("bad https://x.io/api/webhooks/1/abc"))
        'ValueError: bad https://x.io/api/webhooks/1/<REDACTED>'
    """
    return f"{type(exc).__name__}: {sanitize_url(str(exc))}"
