"""Shared utilities: secret sanitization and logging setup."""

from webhook_service.utils.logging import SecretRedactingFilter, configure_logging
from webhook_service.utils.sanitization import (
    REDACTED,
    is_sensitive_field,
    sanitize_exception,
    sanitize_url,
    sanitize_value,
)

__all__ = [
    "REDACTED",
    "SecretRedactingFilter",
    "configure_logging",
    "is_sensitive_field",
    "sanitize_exception",
    "sanitize_url",
    "sanitize_value",
]
