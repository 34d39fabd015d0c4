"""Webhook delivery: dispatcher, rate-limit gate, and transports."""

from webhook_service.delivery.classifier import classify_response, parse_retry_after
from webhook_service.delivery.dispatcher import Dispatcher, get_default_dispatcher, send
from webhook_service.delivery.rate_limit import RateLimitGate, get_default_gate
from webhook_service.delivery.transport import AIOHTTPTransport, HTTPXTransport

__all__ = [
    "AIOHTTPTransport",
    "Dispatcher",
    "HTTPXTransport",
    "RateLimitGate",
    "classify_response",
    "get_default_dispatcher",
    "get_default_gate",
    "parse_retry_after",
    "send",
]
