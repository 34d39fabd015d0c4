"""webhook-service - build and send chat-platform webhook messages.

Fluent builders assemble messages and embeds; a dispatcher validates them,
delivers them over HTTP, and backs off when the platform rate limits.

Example:
    >>> embed = create_embed().set_title("Build passed").set_color((0, 204, 0))
    >>> message = create_message().set_message("CI report").add_embed(embed)
    >>> result = await send(message, webhook_url)
    >>> result.success
    True
"""

from webhook_service.config import DispatcherSettings, load_settings
from webhook_service.delivery import (
    AIOHTTPTransport,
    Dispatcher,
    HTTPXTransport,
    RateLimitGate,
    send,
)
from webhook_service.exceptions import SettingsLoadError, TransportError, WebhookServiceError
from webhook_service.payload import (
    Color,
    EmbedBuilder,
    EmbedData,
    MessageBuilder,
    MessageData,
    create_embed,
    create_message,
    is_sendable,
    platform_limit_violations,
)
from webhook_service.types import DeliveryOutcome, HTTPTransport, Response, SendResult
from webhook_service.utils import configure_logging

__version__ = "1.0.0"

__all__ = [
    "AIOHTTPTransport",
    "Color",
    "DeliveryOutcome",
    "Dispatcher",
    "DispatcherSettings",
    "EmbedBuilder",
    "EmbedData",
    "HTTPTransport",
    "HTTPXTransport",
    "MessageBuilder",
    "MessageData",
    "RateLimitGate",
    "Response",
    "SendResult",
    "SettingsLoadError",
    "TransportError",
    "WebhookServiceError",
    "configure_logging",
    "create_embed",
    "create_message",
    "is_sendable",
    "load_settings",
    "platform_limit_violations",
    "send",
]
