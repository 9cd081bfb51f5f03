# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Asyncio-backed clock.

Timers are ``loop.call_later`` handles and time is ``loop.time()`` scaled to
milliseconds, so scheduler callbacks run on the event loop thread alongside
the code that calls into the scheduler.
"""

import asyncio
import logging
from collections.abc import Callable

from .base import BaseClock

logger = logging.getLogger(__name__)


class AsyncioClock(BaseClock):
    """
    Clock implementation on top of an asyncio event loop.

    If no loop is passed in, the running loop is looked up on every use, so
    an ``AsyncioClock`` can be created outside of a coroutine (for example
    by a module-level decorator) and used from each new loop that
    ``asyncio.run`` starts. An explicitly passed loop is always used.

    Timers still pending when their loop closes never fire. The scheduler
    keeps reporting them as pending until ``cancel`` or ``flush``.

    Example:
        async def main():
            clock = AsyncioClock()
            search = DebouncedCallback(run_search, 300, clock=clock)
            search("py")
            await asyncio.sleep(0.35)  # trailing edge has fired
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._pinned = loop is not None

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._pinned:
            return self._loop  # type: ignore[return-value]
        running = asyncio.get_running_loop()
        if running is not self._loop:
            logger.debug(f"AsyncioClock bound to loop {running!r}")
            self._loop = running
        return running

    def now(self) -> float:
        return self.loop.time() * 1000.0

    def schedule(
        self, delay_ms: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay_ms) / 1000.0, callback)

    def unschedule(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()

    def __repr__(self) -> str:
        return f"AsyncioClock(loop={self._loop!r})"


__all__ = ["AsyncioClock"]
