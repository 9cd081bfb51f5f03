# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Manually advanced virtual clock.

``ManualClock`` keeps a min-heap of pending timers keyed by due time and
scheduling order. Nothing fires until the owner advances time, which makes
every invocation count and payload in a test exactly reproducible.
"""

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .base import BaseClock

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ManualTimerHandle:
    """Handle for a timer registered with a :class:`ManualClock`."""

    due: float
    seq: int
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class ManualClock(BaseClock):
    """
    Virtual clock for deterministic tests and simulations.

    Time only moves when :meth:`advance`, :meth:`advance_to` or
    :meth:`set_time` is called. Timers due at or before the target time fire
    in (due time, scheduling order) order, and the clock reads exactly the
    timer's due time while its callback runs. A timer scheduled from inside
    a callback fires during the same advance if it falls due in range.

    Exceptions raised by a timer callback propagate out of the advancing
    call; the remaining timers stay queued.

    Example:
        clock = ManualClock()
        debounced = DebouncedCallback(handler, 500, clock=clock)
        debounced("a")
        clock.advance(499)   # nothing yet
        clock.advance(1)     # handler("a")
    """

    def __init__(self, start: float = 0) -> None:
        self._now = start
        self._heap: list[tuple[float, int, ManualTimerHandle]] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._now

    def schedule(
        self, delay_ms: float, callback: Callable[[], None]
    ) -> ManualTimerHandle:
        due = self._now + max(0, delay_ms)
        handle = ManualTimerHandle(due=due, seq=next(self._counter), callback=callback)
        heapq.heappush(self._heap, (handle.due, handle.seq, handle))
        return handle

    def unschedule(self, handle: ManualTimerHandle) -> None:
        handle.cancelled = True

    @property
    def pending_timers(self) -> int:
        """Number of timers that have neither fired nor been cancelled."""
        return sum(1 for _, _, handle in self._heap if handle.active)

    def next_due(self) -> float | None:
        """Due time of the earliest active timer, or None."""
        self._discard_inactive()
        return self._heap[0][0] if self._heap else None

    def advance(self, ms: float) -> int:
        """
        Move time forward by *ms* milliseconds, firing due timers.

        Returns:
            Number of timer callbacks that ran
        """
        if ms < 0:
            raise ValueError(f"Cannot advance by a negative amount: {ms}")
        return self.advance_to(self._now + ms)

    def advance_to(self, target: float) -> int:
        """
        Move time forward to *target*, firing due timers.

        Returns:
            Number of timer callbacks that ran
        """
        if target < self._now:
            raise ValueError(
                f"advance_to({target}) is in the past (now={self._now}); "
                "use set_time() to move the clock backwards"
            )

        fired = 0
        while True:
            self._discard_inactive()
            if not self._heap or self._heap[0][0] > target:
                break
            due, _, handle = heapq.heappop(self._heap)
            self._now = due
            handle.fired = True
            fired += 1
            handle.callback()

        self._now = target
        return fired

    def run_all(self, limit: int = 10_000) -> int:
        """
        Fire timers until none remain, moving time to each due point.

        Args:
            limit: Guard against callbacks that keep re-arming forever

        Returns:
            Number of timer callbacks that ran
        """
        fired = 0
        while (due := self.next_due()) is not None:
            if fired >= limit:
                raise RuntimeError(f"run_all() exceeded {limit} timer callbacks")
            fired += self.advance_to(due)
        return fired

    def set_time(self, value: float) -> None:
        """
        Jump the clock to *value* without firing anything.

        Unlike :meth:`advance_to` this may move time backwards, which is how
        tests exercise a clock that went back in time.
        """
        logger.debug(f"ManualClock jumped from {self._now} to {value}")
        self._now = value

    def _discard_inactive(self) -> None:
        while self._heap and not self._heap[0][2].active:
            heapq.heappop(self._heap)

    def __repr__(self) -> str:
        return f"ManualClock(now={self._now}, pending_timers={self.pending_timers})"


__all__ = ["ManualClock", "ManualTimerHandle"]
