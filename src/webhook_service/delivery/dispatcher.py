"""Webhook dispatcher: validation, delivery, and 429 retry.

One call to ``Dispatcher.send`` moves through these states::

    Idle -> RateLimitWait (gate engaged) -> Sending -> Success
                                                    -> ClientError (401/403/404)
                                                    -> RateLimited -> RateLimitWait -> Sending ...
                                                    -> TransportFault

``send`` never raises ``Exception`` to its caller; every outcome is returned
as a ``SendResult``. Cancelling the calling task aborts any wait and releases
the gate.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Final

from webhook_service.config.settings import DispatcherSettings
from webhook_service.delivery.classifier import (
    MSG_INVALID_OBJECT,
    MSG_MISSING_PARAMETERS,
    MSG_RETRY_LIMIT,
    RATE_LIMIT_STATUS,
    classify_response,
    parse_retry_after,
    usage_error,
)
from webhook_service.delivery.rate_limit import RateLimitGate, get_default_gate
from webhook_service.delivery.transport import HTTPXTransport
from webhook_service.payload.message import MessageBuilder
from webhook_service.payload.models import MessageData
from webhook_service.payload.validation import is_sendable
from webhook_service.types.models import DeliveryOutcome, SendResult
from webhook_service.types.protocols import HTTPTransport
from webhook_service.utils.sanitization import sanitize_exception, sanitize_url

logger = logging.getLogger(__name__)

_REQUEST_HEADERS: Final[dict[str, str]] = {"Content-Type": "application/json"}

type SleepFunc = Callable[[float], Awaitable[None]]


class Dispatcher:
    """Sends webhook messages and retries on rate limiting.

    Rate-limit state lives in the injected ``RateLimitGate``. Dispatchers
    created without a gate share the process-wide default, so a 429 seen by
    any of them pauses sends from all of them.
    """

    def __init__(
        self,
        transport: HTTPTransport | None = None,
        *,
        gate: RateLimitGate | None = None,
        poll_interval: float = 1.0,
        request_timeout: float = 10.0,
        max_retries: int | None = None,
        retry_after_header: str = "x-ratelimit-retry-after",
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            transport: HTTP transport; defaults to ``HTTPXTransport()``
            gate: Rate-limit gate; defaults to the process-wide gate
            poll_interval: Seconds between gate checks while waiting
            request_timeout: Timeout in seconds for each request
            max_retries: Cap on 429 retries per send; None retries forever
            retry_after_header: Header carrying the retry delay in seconds
            sleep: Coroutine used for every wait
        """
        self.transport: HTTPTransport = transport if transport is not None else HTTPXTransport()
        self.gate: RateLimitGate = gate if gate is not None else get_default_gate()
        self.poll_interval: float = poll_interval
        self.request_timeout: float = request_timeout
        self.max_retries: int | None = max_retries
        self.retry_after_header: str = retry_after_header
        self._sleep: SleepFunc = sleep

    @classmethod
    def from_settings(
        cls,
        settings: DispatcherSettings,
        *,
        transport: HTTPTransport | None = None,
        gate: RateLimitGate | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> Dispatcher:
        """Build a dispatcher from validated settings."""
        if gate is None:
            gate = get_default_gate(per_url=settings.per_url_rate_limit)
        return cls(
            transport,
            gate=gate,
            poll_interval=settings.poll_interval,
            request_timeout=settings.request_timeout,
            max_retries=settings.max_retries,
            retry_after_header=settings.retry_after_header,
            sleep=sleep,
        )

    async def send(
        self,
        message: MessageBuilder | MessageData | None,
        webhook_url: str | None,
    ) -> SendResult:
        """Validate and deliver ``message`` to ``webhook_url``.

        Args:
            message: Message builder or built message data
            webhook_url: Target webhook URL

        Returns:
            Outcome of the delivery, including retries
        """
        if message is None or not webhook_url:
            logger.error("Send called without a message or webhook URL")
            return usage_error(MSG_MISSING_PARAMETERS)

        if not isinstance(message, (MessageBuilder, MessageData)):
            logger.error("Refusing to send a %s; expected a message", type(message).__name__)
            return usage_error(MSG_INVALID_OBJECT)

        data = message.data if isinstance(message, MessageBuilder) else message
        if not is_sendable(data):
            logger.error("Refusing to send a message with no content and no embeds")
            return usage_error(MSG_INVALID_OBJECT)

        attempts = 0
        try:
            body = data.to_json()
            while True:
                _ = await self.gate.wait_until_clear(
                    webhook_url, poll_interval=self.poll_interval, sleep=self._sleep
                )

                attempts += 1
                logger.debug("POST %s (attempt %d)", webhook_url, attempts)
                response = await self.transport.post(
                    webhook_url,
                    headers=_REQUEST_HEADERS,
                    body=body,
                    timeout=self.request_timeout,
                )

                if response.status != RATE_LIMIT_STATUS:
                    return self._finish(classify_response(response.status, attempts=attempts), webhook_url)

                retry_after = parse_retry_after(response.headers, self.retry_after_header)
                if retry_after is None:
                    logger.warning("Rate limited by %s without a usable retry delay", webhook_url)
                    return classify_response(response.status, attempts=attempts)

                if self.max_retries is not None and attempts > self.max_retries:
                    logger.warning(
                        "Rate limited by %s, giving up after %d retries", webhook_url, self.max_retries
                    )
                    return SendResult(
                        False, RATE_LIMIT_STATUS, MSG_RETRY_LIMIT, DeliveryOutcome.RATE_LIMITED, attempts
                    )

                logger.warning(
                    "Rate limited by %s, retrying after %.2fs (attempt %d)",
                    webhook_url,
                    retry_after,
                    attempts,
                )
                with self.gate.hold(webhook_url):
                    await self._sleep(retry_after)

        except Exception as exc:
            description = sanitize_url(str(exc)) or type(exc).__name__
            logger.error("Webhook delivery to %s failed: %s", webhook_url, sanitize_exception(exc))
            return SendResult(False, 0, description, DeliveryOutcome.TRANSPORT_FAULT, attempts)

    def _finish(self, result: SendResult, webhook_url: str) -> SendResult:
        if result.success:
            logger.info("Webhook delivered to %s (status=%d)", webhook_url, result.code)
        elif result.outcome is DeliveryOutcome.CLIENT_ERROR:
            logger.error("Webhook %s rejected: %s (status=%d)", webhook_url, result.message, result.code)
        else:
            logger.warning("Unexpected response from %s (status=%d)", webhook_url, result.code)
        return result

    def __repr__(self) -> str:
        return f"Dispatcher(transport={type(self.transport).__name__}, gate={self.gate!r})"


_default_dispatcher: Dispatcher | None = None


def get_default_dispatcher() -> Dispatcher:
    """Return the lazily created dispatcher used by ``send``."""
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = Dispatcher()
    return _default_dispatcher


async def send(
    message: MessageBuilder | MessageData | None,
    webhook_url: str | None,
) -> SendResult:
    """Send ``message`` with the default dispatcher and process-wide gate."""
    return await get_default_dispatcher().send(message, webhook_url)
