"""Shared rate-limit gate consulted before every send.

When a send receives a 429 it holds the gate for the server's retry delay.
While any hold is active, other sends wait before issuing their request.
By default the gate is global across webhook URLs; ``per_url=True`` limits
the hold to the URL that was rate limited.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import Final

logger = logging.getLogger(__name__)

_GLOBAL_KEY: Final[str] = "*"


class RateLimitGate:
    """Reference-counted rate-limit flag.

    Holds are counted rather than stored as a single boolean so that two
    overlapping 429 waits cannot clear each other's hold early. Counter
    updates take a ``threading.Lock`` so one gate can be shared by event
    loops running in different threads.
    """

    def __init__(self, *, per_url: bool = False) -> None:
        """Initialize the gate.

        Args:
            per_url: Key holds by webhook URL instead of gating every send
        """
        self.per_url: bool = per_url
        self._holds: dict[str, int] = {}
        self._lock: threading.Lock = threading.Lock()

    def _key(self, url: str | None) -> str:
        if self.per_url and url:
            return url
        return _GLOBAL_KEY

    def is_limited(self, url: str | None = None) -> bool:
        """Return True while a hold applies to ``url``."""
        with self._lock:
            return self._holds.get(self._key(url), 0) > 0

    def engage(self, url: str | None = None) -> None:
        """Add a hold for ``url`` (or for every URL on a global gate)."""
        key = self._key(url)
        with self._lock:
            self._holds[key] = self._holds.get(key, 0) + 1

    def release(self, url: str | None = None) -> None:
        """Remove one hold previously added with ``engage``."""
        key = self._key(url)
        with self._lock:
            remaining = self._holds.get(key, 0) - 1
            if remaining > 0:
                self._holds[key] = remaining
            else:
                _ = self._holds.pop(key, None)

    @contextmanager
    def hold(self, url: str | None = None) -> Iterator[None]:
        """Keep the gate engaged for the duration of the block."""
        self.engage(url)
        try:
            yield
        finally:
            self.release(url)

    async def wait_until_clear(
        self,
        url: str | None = None,
        *,
        poll_interval: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> int:
        """Suspend the caller until no hold applies to ``url``.

        Polls at ``poll_interval``. Waiters are not ordered; once the gate
        clears any of them may proceed first.

        Returns:
            Number of poll intervals waited
        """
        polls = 0
        while self.is_limited(url):
            if polls == 0:
                logger.debug("Rate-limit gate engaged, waiting to send")
            polls += 1
            await sleep(poll_interval)
        return polls

    def __repr__(self) -> str:
        return f"RateLimitGate(per_url={self.per_url}, holds={sum(self._holds.values())})"


_default_gates: dict[bool, RateLimitGate] = {
    False: RateLimitGate(),
    True: RateLimitGate(per_url=True),
}


def get_default_gate(*, per_url: bool = False) -> RateLimitGate:
    """Return the process-wide gate shared by dispatchers built without one."""
    return _default_gates[per_url]
