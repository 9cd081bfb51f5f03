# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base Clock for the Edge Scheduler

This module provides the BaseClock abstract class that defines the common
interface for all clock implementations. Any object satisfying
``ClockProtocol`` can drive a scheduler; subclassing BaseClock is the
convenient way to get there.
"""

import abc
from collections.abc import Callable
from typing import Any


class BaseClock(abc.ABC):
    """
    An abstract base class for clock implementations.

    A clock provides monotonic milliseconds and one-shot timers. Timer
    callbacks must run on the same thread that calls into the scheduler;
    the scheduler relies on this for its run-to-completion guarantees.
    """

    @abc.abstractmethod
    def now(self) -> float:
        """
        Get the current time.

        Returns:
            Monotonic time in milliseconds
        """
        pass

    @abc.abstractmethod
    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> Any:
        """
        Schedule a one-shot callback.

        Args:
            delay_ms: Delay in milliseconds. Negative delays are treated as 0.
            callback: Zero-argument callable to run when the delay elapses

        Returns:
            A handle that can be passed to :meth:`unschedule`
        """
        pass

    @abc.abstractmethod
    def unschedule(self, handle: Any) -> None:
        """
        Cancel a scheduled callback.

        Must be a no-op for handles that already fired or were cancelled.

        Args:
            handle: Handle returned by :meth:`schedule`
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(now={self.now()})"


__all__ = ["BaseClock"]
