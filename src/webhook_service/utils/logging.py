"""Logging setup with webhook token redaction.

Library modules only call ``logging.getLogger(__name__)``. Applications that
want the library's formatting and redaction call ``configure_logging`` once
at startup, or attach ``SecretRedactingFilter`` to their own handlers.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Final, override

from webhook_service.utils.sanitization import sanitize_args, sanitize_url, sanitize_value

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LIBRARY_LOGGER: Final[str] = "webhook_service"


class SecretRedactingFilter(logging.Filter):
    """Logging filter that redacts webhook tokens from log records.

    Sanitizes the message text and its % formatting arguments, positional
    or mapping, so a webhook URL passed any way never reaches the handler intact.

    Examples:
        >>> logger.info("POST to %s", "https://discord.com/api/webhooks/123/token")
        # Logged as: "POST to https://discord.com/api/webhooks/123/<REDACTED>"
    """

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = sanitize_url(record.msg)
        if isinstance(record.args, tuple) and record.args:
            record.args = sanitize_args(record.args)
        elif isinstance(record.args, Mapping):
            record.args = {
                str(key): sanitize_value(value, field_name=str(key))
                for key, value in record.args.items()
            }
        return True


def configure_logging(
    *,
    log_level: str = "INFO",
    enable_console: bool = True,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> logging.Logger:
    """Configure the library logger with redaction and console output.

    Only the ``webhook_service`` logger is touched; the root logger and any
    application handlers are left alone.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        enable_console: Attach a stdout handler
        log_format: Format string for the console handler

    Returns:
        The configured library logger
    """
    library_logger = logging.getLogger(_LIBRARY_LOGGER)
    library_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove handlers installed by a previous call to avoid duplicates
    for handler in list(library_logger.handlers):
        if any(isinstance(f, SecretRedactingFilter) for f in handler.filters):
            library_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(log_format))
        console_handler.addFilter(SecretRedactingFilter())
        library_logger.addHandler(console_handler)

    return library_logger
