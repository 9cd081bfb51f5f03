# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Invocation edge classification."""

from enum import Enum


class InvocationEdge(Enum):
    """Why an operation was invoked.

    - LEADING: First call of a new quiet-then-busy window, with ``leading``
      enabled.
    - TRAILING: The wait timer expired after the last call in a window.
    - MAX_WAIT: A call arrived while the timer was armed but ``max_wait``
      had already elapsed since the last invocation.
    - FLUSH: The trailing edge was forced by ``flush()``.
    """

    LEADING = "leading"
    TRAILING = "trailing"
    MAX_WAIT = "max_wait"
    FLUSH = "flush"

    @property
    def is_deferred(self) -> bool:
        """Whether invocations on this edge run from a timer callback."""
        return self is InvocationEdge.TRAILING


__all__ = ["InvocationEdge"]
