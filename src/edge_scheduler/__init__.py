# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Edge Scheduler - Debounce and throttle for Python callables and values.

This library decides when a wrapped operation runs given a burst of calls:
on the leading edge, on the trailing edge after a quiet period, or at least
once per max-wait window.

Key Features:
    - One scheduling core shared by debounce and throttle
    - Imperative (callable) and reactive (value) front-ends
    - Injectable clocks: asyncio event loop or manual virtual time
    - cancel / flush / pending control and runtime reconfiguration
    - Optional Prometheus metrics

Quick Start:
    >>> import asyncio
    >>> from edge_scheduler import debounced
    >>>
    >>> @debounced(wait=300)
    ... def search(term: str) -> None:
    ...     print(f"searching {term}")
    >>>
    >>> async def main():
    ...     for term in ("p", "py", "pyt"):
    ...         search(term)
    ...     await asyncio.sleep(0.35)   # prints "searching pyt"
    >>>
    >>> asyncio.run(main())

Deterministic testing:
    >>> from edge_scheduler import DebouncedCallback, ManualClock
    >>> clock = ManualClock()
    >>> save = DebouncedCallback(print, 500, clock=clock)
    >>> save("draft")
    >>> clock.advance(500)   # prints "draft"

Main Exports:
    - DebouncedCallback, debounced, ThrottledCallback, throttled
    - DebouncedValue, ThrottledValue
    - create_adapter: Factory by kind name
    - InvocationScheduler, SchedulerConfig, SchedulerOptions: Core
    - AsyncioClock, ManualClock: Clocks

Version: 1.0.0
"""

__version__ = "1.0.0"

from .adapters import (
    ADAPTER_KINDS,
    BaseAdapter,
    DebouncedCallback,
    DebouncedValue,
    ThrottledCallback,
    ThrottledValue,
    create_adapter,
    debounced,
    throttled,
)
from .clocks import AsyncioClock, BaseClock, ManualClock, ManualTimerHandle
from .exceptions import (
    ConfigurationError,
    DeferredInvocationError,
    EdgeSchedulerError,
    SchedulerDisposedError,
)
from .observability import (
    MetricsCollectorProtocol,
    SchedulerMetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)
from .protocols import ClockProtocol, ErrorHandlerProtocol
from .scheduler import (
    DEFAULT_WAIT_MS,
    InvocationScheduler,
    SchedulerConfig,
    SchedulerMode,
    SchedulerOptions,
)
from .types import NO_PAYLOAD, CallArguments, InvocationEdge, SchedulerState

__all__ = [
    # Version
    "__version__",
    # Adapters
    "ADAPTER_KINDS",
    "BaseAdapter",
    "DebouncedCallback",
    "DebouncedValue",
    "ThrottledCallback",
    "ThrottledValue",
    "create_adapter",
    "debounced",
    "throttled",
    # Clocks
    "AsyncioClock",
    "BaseClock",
    "ManualClock",
    "ManualTimerHandle",
    # Exceptions
    "ConfigurationError",
    "DeferredInvocationError",
    "EdgeSchedulerError",
    "SchedulerDisposedError",
    # Observability
    "MetricsCollectorProtocol",
    "SchedulerMetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
    # Protocols
    "ClockProtocol",
    "ErrorHandlerProtocol",
    # Scheduler
    "DEFAULT_WAIT_MS",
    "InvocationScheduler",
    "SchedulerConfig",
    "SchedulerMode",
    "SchedulerOptions",
    # Types
    "NO_PAYLOAD",
    "CallArguments",
    "InvocationEdge",
    "SchedulerState",
]
