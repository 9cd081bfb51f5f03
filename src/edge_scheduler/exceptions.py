# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the edge scheduler library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from EdgeSchedulerError, making it easy to catch
all scheduler-related exceptions with a single except clause.

Exceptions raised by a wrapped operation on a synchronous path (a leading
edge inside ``call``, or ``flush``) are NOT wrapped: they propagate to the
caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types.edge import InvocationEdge


class EdgeSchedulerError(Exception):
    """Base exception for all edge scheduler errors.

    Example:
        try:
            debounced("payload")
        except EdgeSchedulerError as e:
            logger.error(f"Scheduler error: {e}")
    """

    pass


class ConfigurationError(EdgeSchedulerError):
    """Raised when scheduler options are invalid.

    Out-of-range numbers are clamped rather than rejected, so this is only
    raised for values of the wrong type, unknown option names, or an
    unknown adapter kind.

    Example:
        try:
            options = SchedulerOptions(wait="soon")
        except ConfigurationError as e:
            logger.error(f"Invalid configuration: {e}")
    """

    pass


class SchedulerDisposedError(EdgeSchedulerError):
    """Raised when a disposed scheduler or adapter receives a new call.

    Attributes:
        scheduler_name: Name of the disposed scheduler.
    """

    def __init__(self, scheduler_name: str = "default"):
        super().__init__(f"Scheduler '{scheduler_name}' has been disposed")
        self.scheduler_name = scheduler_name


class DeferredInvocationError(EdgeSchedulerError):
    """Raised when an operation fails inside a timer callback.

    A deferred invocation has no synchronous caller, so the original
    exception is wrapped in this class and handed to the scheduler's
    error channel. The original exception is available as ``__cause__``
    and as :attr:`original`.

    Attributes:
        edge: The edge that triggered the failing invocation.
        scheduler_name: Name of the scheduler that owned the timer.
        original: The exception raised by the operation.

    Example:
        def report(error: DeferredInvocationError) -> None:
            sentry_sdk.capture_exception(error.original)

        search = DebouncedCallback(run_search, 300, on_error=report)
    """

    def __init__(
        self,
        original: BaseException,
        edge: InvocationEdge,
        scheduler_name: str = "default",
    ):
        super().__init__(
            f"Deferred {edge.value} invocation failed in scheduler "
            f"'{scheduler_name}': {original!r}"
        )
        self.original = original
        self.edge = edge
        self.scheduler_name = scheduler_name


__all__ = [
    "ConfigurationError",
    "DeferredInvocationError",
    "EdgeSchedulerError",
    "SchedulerDisposedError",
]
