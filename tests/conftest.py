"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from tests.fixtures.transports import FakeTransport, RecordingSleep
from webhook_service.delivery.dispatcher import Dispatcher
from webhook_service.delivery.rate_limit import RateLimitGate
from webhook_service.payload.embed import EmbedBuilder
from webhook_service.payload.message import MessageBuilder


@pytest.fixture
def webhook_url() -> str:
    """A webhook URL in the platform's id/token layout."""
    return "https://discord.com/api/webhooks/123456789/abcdefg"


@pytest.fixture
def other_webhook_url() -> str:
    """A second, unrelated webhook URL."""
    return "https://discord.com/api/webhooks/987654321/hijklmn"


@pytest.fixture
def transport() -> FakeTransport:
    """Transport answering 200 to every request."""
    return FakeTransport()


@pytest.fixture
def gate() -> RateLimitGate:
    """Gate private to one test so tests never share rate-limit state."""
    return RateLimitGate()


@pytest.fixture
def sleep() -> RecordingSleep:
    """Sleep double that returns immediately."""
    return RecordingSleep()


@pytest.fixture
def dispatcher(transport: FakeTransport, gate: RateLimitGate, sleep: RecordingSleep) -> Dispatcher:
    """Dispatcher wired to the fake transport, a private gate, and instant sleeps."""
    return Dispatcher(transport, gate=gate, sleep=sleep)


@pytest.fixture
def message() -> MessageBuilder:
    """A sendable message with content and one embed."""
    embed = EmbedBuilder().set_title("Deploy finished").add_field("Duration", "42s", inline=True)
    return MessageBuilder().set_message("CI report").set_username("ci-bot").add_embed(embed)
