# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Mutable scheduler state.

One ``SchedulerState`` is owned by exactly one ``InvocationScheduler`` and is
only mutated by that scheduler's own methods. Callers that want to look at it
get a copy through ``InvocationScheduler.state``.
"""

from dataclasses import dataclass, replace
from typing import Any, Final


class _NoPayload:
    """Sentinel type marking the absence of a pending payload.

    ``None`` is a legitimate payload, so it cannot double as "nothing pending".
    """

    _instance: "_NoPayload | None" = None

    def __new__(cls) -> "_NoPayload":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_PAYLOAD"

    def __bool__(self) -> bool:
        return False


NO_PAYLOAD: Final = _NoPayload()


@dataclass
class SchedulerState:
    """
    Timing and payload state of a single scheduler.

    Attributes:
        last_call_time: Clock time (ms) of the most recent ``call``, or None
            if no call has happened since construction or the last cancel.
        last_invoke_time: Clock time (ms) of the most recent invocation or
            leading edge. 0 means never.
        pending_payload: Payload of the most recent call not yet consumed by
            a trailing edge, or ``NO_PAYLOAD``.
        timer_handle: Handle of the armed trailing timer, or None.
        last_result: Return value of the most recent invocation.
    """

    last_call_time: float | None = None
    last_invoke_time: float = 0
    pending_payload: Any = NO_PAYLOAD
    timer_handle: Any = None
    last_result: Any = None

    @property
    def has_pending_payload(self) -> bool:
        return self.pending_payload is not NO_PAYLOAD

    @property
    def timer_armed(self) -> bool:
        return self.timer_handle is not None

    def reset_timing(self) -> None:
        """Forget call/invoke history and any pending payload.

        ``last_result`` survives: a cancelled debouncer still reports the
        value it last produced.
        """
        self.last_call_time = None
        self.last_invoke_time = 0
        self.pending_payload = NO_PAYLOAD
        self.timer_handle = None

    def snapshot(self) -> "SchedulerState":
        return replace(self)


__all__ = ["NO_PAYLOAD", "SchedulerState"]
