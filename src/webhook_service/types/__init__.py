"""Type definitions shared across webhook-service."""

from webhook_service.types.models import DeliveryOutcome, Response, SendResult
from webhook_service.types.protocols import HTTPTransport

__all__ = [
    "DeliveryOutcome",
    "HTTPTransport",
    "Response",
    "SendResult",
]
