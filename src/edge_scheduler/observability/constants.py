# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

All metric names use the `edge_scheduler_` prefix.

Naming Conventions:
    - Counter metrics end with `_total`
    - Histogram metrics for time end with `_seconds`
    - Gauges use present-tense descriptive names

Label Best Practices:
    To prevent label cardinality explosion, use only:
    - `scheduler` - Scheduler name (categorical: "search", "resize")
    - `edge` - Invocation edge (enum: leading, trailing, max_wait, flush)

    NEVER use payload values or call ids as labels.

Usage:
    >>> from edge_scheduler.observability.constants import INVOCATIONS_TOTAL
    >>> print(INVOCATIONS_TOTAL)
    'edge_scheduler_invocations_total'
"""


# =============================================================================
# Global Prefix
# =============================================================================

METRIC_PREFIX = "edge_scheduler"
"""Prefix for all Prometheus metrics in this library."""


# =============================================================================
# Scheduling Metrics (scheduler/core.py)
# =============================================================================

CALLS_TOTAL = f"{METRIC_PREFIX}_calls_total"
"""Total calls received by schedulers."""

INVOCATIONS_TOTAL = f"{METRIC_PREFIX}_invocations_total"
"""Total operation invocations, labelled by edge."""

CANCELLATIONS_TOTAL = f"{METRIC_PREFIX}_cancellations_total"
"""Total cancel() calls that discarded an armed timer."""

FLUSHES_TOTAL = f"{METRIC_PREFIX}_flushes_total"
"""Total flush() calls that found an armed timer."""

TIMER_REARMS_TOTAL = f"{METRIC_PREFIX}_timer_rearms_total"
"""Total timer expiries that re-armed instead of invoking."""

DEFERRED_ERRORS_TOTAL = f"{METRIC_PREFIX}_deferred_errors_total"
"""Total exceptions raised by operations inside timer callbacks."""


# =============================================================================
# Gauges and Histograms
# =============================================================================

PENDING_TIMERS = f"{METRIC_PREFIX}_pending_timers"
"""Schedulers that currently have a trailing timer armed."""

INVOCATION_DELAY_SECONDS = f"{METRIC_PREFIX}_invocation_delay_seconds"
"""Time between the latest call and the invocation that consumed it."""

DELAY_BUCKETS: list[float] = [
    0.0,
    0.01,
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
]
"""Histogram buckets for invocation delays (seconds)."""


__all__ = [
    "CALLS_TOTAL",
    "CANCELLATIONS_TOTAL",
    "DEFERRED_ERRORS_TOTAL",
    "DELAY_BUCKETS",
    "FLUSHES_TOTAL",
    "INVOCATIONS_TOTAL",
    "INVOCATION_DELAY_SECONDS",
    "METRIC_PREFIX",
    "PENDING_TIMERS",
    "TIMER_REARMS_TOTAL",
]
