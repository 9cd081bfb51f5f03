# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the time source and timer service used by schedulers."""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ClockProtocol(Protocol):
    """
    Minimal protocol for clock integration.

    The scheduler never calls ``time`` or an event loop directly; every
    timestamp and every deferred callback goes through this interface so
    tests can drive virtual time deterministically.

    Times and delays are milliseconds. Handles are opaque to the scheduler.
    """

    def now(self) -> float:
        """Current monotonic time in milliseconds."""
        ...

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> Any:
        """
        Run *callback* once after *delay_ms* milliseconds.

        Args:
            delay_ms: Non-negative delay in milliseconds
            callback: Zero-argument callable

        Returns:
            An opaque handle accepted by :meth:`unschedule`
        """
        ...

    def unschedule(self, handle: Any) -> None:
        """Cancel a scheduled callback. No-op if it already fired or was cleared."""
        ...
