# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Clock implementations for driving schedulers.

Available clocks:
- BaseClock: Abstract base class defining the clock interface
- AsyncioClock: Real time on an asyncio event loop (``loop.call_later``)
- ManualClock: Virtual time advanced explicitly, for deterministic tests

Supporting types:
- ManualTimerHandle: Timer handle returned by ManualClock.schedule
"""

from edge_scheduler.clocks.base import BaseClock
from edge_scheduler.clocks.event_loop import AsyncioClock
from edge_scheduler.clocks.manual import ManualClock, ManualTimerHandle

__all__ = [
    "AsyncioClock",
    "BaseClock",
    "ManualClock",
    "ManualTimerHandle",
]
