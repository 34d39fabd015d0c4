"""Classification of webhook responses into send results."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Final

from webhook_service.types.models import DeliveryOutcome, SendResult

SUCCESS_STATUSES: Final[tuple[int, ...]] = (200, 201, 202, 204)
RATE_LIMIT_STATUS: Final[int] = 429

MSG_SENT: Final[str] = "Webhook has been sent!"
MSG_NOT_FOUND: Final[str] = "Webhook not found"
MSG_INVALID_WEBHOOK: Final[str] = "Invalid webhook"
MSG_COULD_NOT_RETRY: Final[str] = "Could not retry request"
MSG_RETRY_LIMIT: Final[str] = "Retry limit exceeded"
MSG_UNEXPECTED: Final[str] = "Unexpected response"
MSG_MISSING_PARAMETERS: Final[str] = "Missing parameters"
MSG_INVALID_OBJECT: Final[str] = "Invalid webhook object"


def classify_response(status: int, *, attempts: int) -> SendResult:
    """Map a final (non-429) HTTP status to a send result.

    Args:
        status: HTTP status code
        attempts: Number of requests issued for this send

    Returns:
        Send result describing the outcome
    """
    if status in SUCCESS_STATUSES:
        return SendResult(True, status, MSG_SENT, DeliveryOutcome.SENT, attempts)
    if status == 404:
        return SendResult(False, status, MSG_NOT_FOUND, DeliveryOutcome.CLIENT_ERROR, attempts)
    if status in (401, 403):
        return SendResult(False, status, MSG_INVALID_WEBHOOK, DeliveryOutcome.CLIENT_ERROR, attempts)
    if status == RATE_LIMIT_STATUS:
        return SendResult(False, status, MSG_COULD_NOT_RETRY, DeliveryOutcome.RATE_LIMITED, attempts)
    return SendResult(False, status, MSG_UNEXPECTED, DeliveryOutcome.UNEXPECTED_RESPONSE, attempts)


def usage_error(message: str) -> SendResult:
    """Result for a send rejected before any request was made."""
    return SendResult(False, 0, message, DeliveryOutcome.USAGE_ERROR, 0)


def parse_retry_after(headers: Mapping[str, str], header_name: str) -> float | None:
    """Read the retry delay in seconds from response headers.

    Args:
        headers: Response headers (lookup is case-insensitive)
        header_name: Name of the header carrying the delay

    Returns:
        Delay in seconds, or None if absent, unparseable, negative, or not finite
    """
    wanted = header_name.lower()
    raw = next((value for key, value in headers.items() if key.lower() == wanted), None)
    if raw is None:
        return None
    try:
        delay = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(delay) or delay < 0:
        return None
    return delay
