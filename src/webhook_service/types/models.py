"""Data models shared by the delivery pipeline.

This module defines the dataclasses exchanged between the dispatcher and
its transports, and the result value returned to callers of ``send``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class DeliveryOutcome(Enum):
    """Classification of a completed send attempt."""

    SENT = "sent"
    USAGE_ERROR = "usage_error"  # missing parameters or unsendable payload
    CLIENT_ERROR = "client_error"  # 401/403/404
    RATE_LIMITED = "rate_limited"  # 429 that could not be retried
    TRANSPORT_FAULT = "transport_fault"
    UNEXPECTED_RESPONSE = "unexpected_response"


@dataclass(slots=True)
class Response:
    """HTTP response.

    Represents an HTTP response with status code, headers, and raw body.
    Header names are lower-cased by the transports.
    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(slots=True, frozen=True)
class SendResult:
    """Result of a webhook delivery.

    ``send`` never raises to its caller; every failure is reported through
    this value instead.
    """

    success: bool
    code: int
    message: str
    outcome: DeliveryOutcome
    attempts: int = 0
