# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability and metrics for the Edge Scheduler.

Classes:
    SchedulerMetricsCollector: Dict-backed collector mirrored into Prometheus.

Protocols:
    MetricsCollectorProtocol: Protocol for metrics collection backends.

Functions:
    get_metrics_collector: Get the global metrics collector singleton.
    reset_metrics_collector: Reset the global metrics collector singleton.

Constants:
    All metric name constants from the constants module.
"""

from .collector import (
    METRIC_DEFINITIONS,
    MetricDefinition,
    SchedulerMetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)
from .constants import (
    CALLS_TOTAL,
    CANCELLATIONS_TOTAL,
    DEFERRED_ERRORS_TOTAL,
    DELAY_BUCKETS,
    FLUSHES_TOTAL,
    INVOCATION_DELAY_SECONDS,
    INVOCATIONS_TOTAL,
    METRIC_PREFIX,
    PENDING_TIMERS,
    TIMER_REARMS_TOTAL,
)
from .protocols import MetricsCollectorProtocol

__all__ = [
    "CALLS_TOTAL",
    "CANCELLATIONS_TOTAL",
    "DEFERRED_ERRORS_TOTAL",
    "DELAY_BUCKETS",
    "FLUSHES_TOTAL",
    "INVOCATIONS_TOTAL",
    "INVOCATION_DELAY_SECONDS",
    "METRIC_DEFINITIONS",
    "METRIC_PREFIX",
    "PENDING_TIMERS",
    "TIMER_REARMS_TOTAL",
    "MetricDefinition",
    "MetricsCollectorProtocol",
    "SchedulerMetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
