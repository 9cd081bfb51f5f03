"""
Shared fixtures for unit tests.
"""

import pytest
from prometheus_client import CollectorRegistry

from edge_scheduler.clocks import ManualClock
from edge_scheduler.observability.collector import (
    SchedulerMetricsCollector,
    reset_metrics_collector,
)


@pytest.fixture
def clock() -> ManualClock:
    """Virtual clock starting at t=0."""
    return ManualClock()


@pytest.fixture
def registry() -> CollectorRegistry:
    """Isolated Prometheus registry so tests never touch the global one."""
    return CollectorRegistry()


@pytest.fixture
def collector(registry: CollectorRegistry) -> SchedulerMetricsCollector:
    """Metrics collector bound to the isolated registry."""
    return SchedulerMetricsCollector(registry=registry)


@pytest.fixture(autouse=True)
def _reset_global_collector():
    """Drop the global collector singleton between tests."""
    yield
    reset_metrics_collector()
