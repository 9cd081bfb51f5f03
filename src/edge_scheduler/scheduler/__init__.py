# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Scheduler core and configuration.

Classes:
    InvocationScheduler: Edge-timing state machine shared by all front-ends.
    SchedulerOptions: Validated user options.
    SchedulerConfig: Resolved, immutable configuration.
    SchedulerMode: Debounce or throttle preset.
"""

from .config import DEFAULT_WAIT_MS, SchedulerConfig, SchedulerMode, SchedulerOptions
from .core import InvocationScheduler

__all__ = [
    "DEFAULT_WAIT_MS",
    "InvocationScheduler",
    "SchedulerConfig",
    "SchedulerMode",
    "SchedulerOptions",
]
