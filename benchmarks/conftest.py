"""
Shared fixtures for benchmark tests.
"""

import pytest
from prometheus_client import CollectorRegistry

from edge_scheduler.clocks import ManualClock
from edge_scheduler.observability.collector import SchedulerMetricsCollector
from edge_scheduler.scheduler import InvocationScheduler, SchedulerConfig


def noop(payload):
    return payload


@pytest.fixture
def manual_clock():
    """Virtual clock so benchmarks never sleep."""
    return ManualClock()


@pytest.fixture
def debounce_scheduler(manual_clock):
    """Trailing-only debounce scheduler with a no-op operation."""
    return InvocationScheduler(noop, SchedulerConfig(wait=100), manual_clock)


@pytest.fixture
def metered_scheduler(manual_clock):
    """Same scheduler, recording metrics in an isolated registry."""
    collector = SchedulerMetricsCollector(registry=CollectorRegistry())
    return InvocationScheduler(
        noop,
        SchedulerConfig(wait=100),
        manual_clock,
        metrics_collector=collector,
        name="bench",
    )
