"""Tests for the shared rate-limit gate."""

from __future__ import annotations

import asyncio
import threading

import pytest

from tests.fixtures.transports import RecordingSleep
from webhook_service.delivery.rate_limit import RateLimitGate, get_default_gate


class TestGlobalGate:
    def test_starts_clear(self) -> None:
        assert RateLimitGate().is_limited() is False

    def test_engage_applies_to_every_url(self) -> None:
        gate = RateLimitGate()
        gate.engage("https://a.example/api/webhooks/1/x")

        assert gate.is_limited("https://b.example/api/webhooks/2/y") is True
        assert gate.is_limited() is True

    def test_holds_are_counted(self) -> None:
        """Releasing one of two holds leaves the gate engaged."""
        gate = RateLimitGate()
        gate.engage()
        gate.engage()
        gate.release()

        assert gate.is_limited() is True

        gate.release()
        assert gate.is_limited() is False

    def test_extra_release_is_harmless(self) -> None:
        gate = RateLimitGate()
        gate.release()

        assert gate.is_limited() is False
        gate.engage()
        assert gate.is_limited() is True

    def test_hold_context_releases_on_error(self) -> None:
        gate = RateLimitGate()

        with pytest.raises(ValueError):
            with gate.hold():
                assert gate.is_limited() is True
                raise ValueError("boom")

        assert gate.is_limited() is False

    def test_concurrent_threads_keep_count_consistent(self) -> None:
        gate = RateLimitGate()

        def churn() -> None:
            for _ in range(1000):
                gate.engage()
                gate.release()

        threads = [threading.Thread(target=churn) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert gate.is_limited() is False


class TestPerUrlGate:
    def test_hold_only_applies_to_its_url(self) -> None:
        gate = RateLimitGate(per_url=True)
        gate.engage("https://a.example/hook")

        assert gate.is_limited("https://a.example/hook") is True
        assert gate.is_limited("https://b.example/hook") is False


class TestWaitUntilClear:
    async def test_returns_immediately_when_clear(self) -> None:
        sleep = RecordingSleep()

        polls = await RateLimitGate().wait_until_clear(sleep=sleep)

        assert polls == 0
        assert sleep.delays == []

    async def test_polls_at_interval_until_released(self) -> None:
        gate = RateLimitGate()
        gate.engage()
        delays: list[float] = []

        async def releasing_sleep(delay: float) -> None:
            delays.append(delay)
            if len(delays) == 3:
                gate.release()

        polls = await gate.wait_until_clear(poll_interval=1.0, sleep=releasing_sleep)

        assert polls == 3
        assert delays == [1.0, 1.0, 1.0]

    async def test_all_waiters_proceed_after_release(self) -> None:
        gate = RateLimitGate()
        gate.engage()
        waiters = [asyncio.create_task(gate.wait_until_clear(poll_interval=0.01)) for _ in range(5)]
        await asyncio.sleep(0.05)

        assert not any(waiter.done() for waiter in waiters)

        gate.release()
        polls = await asyncio.wait_for(asyncio.gather(*waiters), timeout=2.0)

        assert all(count >= 1 for count in polls)


def test_default_gates_are_singletons() -> None:
    assert get_default_gate() is get_default_gate()
    assert get_default_gate(per_url=True).per_url is True
    assert get_default_gate() is not get_default_gate(per_url=True)
