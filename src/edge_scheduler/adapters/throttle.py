# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Throttle presets of the callback and value front-ends.

A throttle is a debounce whose ``max_wait`` equals ``wait`` and whose
leading edge is on by default, so the wrapped operation runs at most once
per window while calls keep arriving.
"""

from collections.abc import Callable
from typing import Any, ClassVar

from ..scheduler.config import DEFAULT_WAIT_MS, SchedulerMode
from .callback import DebouncedCallback
from .value import DebouncedValue


class ThrottledCallback(DebouncedCallback):
    """
    Callable that forwards to *callback* at most once per ``wait`` ms.

    Both edges are on by default. ``max_wait`` is not accepted.

    Example:
        on_scroll = ThrottledCallback(update_header, 100)
    """

    mode: ClassVar[SchedulerMode] = SchedulerMode.THROTTLE
    allows_max_wait: ClassVar[bool] = False


class ThrottledValue(DebouncedValue):
    """Value whose committed copy changes at most once per ``wait`` ms."""

    mode: ClassVar[SchedulerMode] = SchedulerMode.THROTTLE
    allows_max_wait: ClassVar[bool] = False


def throttled(
    func: Callable[..., Any] | None = None,
    /,
    *,
    wait: float | None = DEFAULT_WAIT_MS,
    **options: Any,
) -> Any:
    """
    Decorator form of :class:`ThrottledCallback`.

        @throttled(wait=100)
        def on_resize(width, height): ...
    """

    def decorator(fn: Callable[..., Any]) -> ThrottledCallback:
        return ThrottledCallback(fn, wait, **options)

    if func is not None:
        return decorator(func)
    return decorator


__all__ = ["ThrottledCallback", "ThrottledValue", "throttled"]
