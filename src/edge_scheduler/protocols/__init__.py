# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for edge scheduler components.

Available protocols:
- ClockProtocol: Time source and timer service (now / schedule / unschedule)
- ErrorHandlerProtocol: Error channel for failures in deferred invocations
"""

from .clock import ClockProtocol
from .error_handler import ErrorHandlerProtocol

__all__ = [
    "ClockProtocol",
    "ErrorHandlerProtocol",
]
