# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for metrics collection backends.

Schedulers only talk to a collector through this protocol, so an
in-memory double, StatsD or OpenTelemetry bridge can replace the bundled
Prometheus-backed collector.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetricsCollectorProtocol(Protocol):
    """
    Protocol for metrics collection backends.

    This protocol defines the core operations for:
    - Counters: Monotonically increasing values (calls, invocations, errors)
    - Gauges: Values that can increase or decrease (armed timers)
    - Histograms: Distribution of values (invocation delay)

    Example:
        >>> class MyCollector:
        ...     def inc_counter(self, name, value=1, labels=None): pass
        ...     def set_gauge(self, name, value, labels=None): pass
        ...     def inc_gauge(self, name, value=1.0, labels=None): pass
        ...     def dec_gauge(self, name, value=1.0, labels=None): pass
        ...     def observe_histogram(self, name, value, labels=None): pass
        ...     def get_metrics(self): return {}
        ...     def reset(self): pass
        >>>
        >>> isinstance(MyCollector(), MetricsCollectorProtocol)
        True
    """

    def inc_counter(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Increment a counter metric.

        Raises:
            ValueError: If value is negative
        """
        ...

    def set_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def inc_gauge(
        self,
        name: str,
        value: float = 1.0,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def dec_gauge(
        self,
        name: str,
        value: float = 1.0,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def observe_histogram(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Record an observation (seconds for time-based histograms)."""
        ...

    def get_metrics(self) -> dict[str, Any]:
        """
        Get a snapshot of all metrics.

        Returns:
            Dictionary with structure:
            {
                "counters": {"metric_name": {"label_key": value, ...}, ...},
                "gauges": {"metric_name": {"label_key": value, ...}, ...},
                "histograms": {"metric_name": {"label_key": {...}, ...}, ...}
            }
        """
        ...

    def reset(self) -> None: ...


__all__ = ["MetricsCollectorProtocol"]
