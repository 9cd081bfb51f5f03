# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Core types for the edge scheduler.

This module provides:
- InvocationEdge: Why an operation was invoked
- SchedulerState: Mutable timing/payload record owned by one scheduler
- NO_PAYLOAD: Sentinel for "no call pending"
- CallArguments: Packed ``*args, **kwargs`` payload used by callback adapters
"""

from .arguments import CallArguments
from .edge import InvocationEdge
from .state import NO_PAYLOAD, SchedulerState

__all__ = [
    "NO_PAYLOAD",
    "CallArguments",
    "InvocationEdge",
    "SchedulerState",
]
