# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Reactive front-end: a value whose committed copy lags behind its input.
"""

import logging
import math
from collections.abc import Callable
from typing import Any

from ..scheduler.config import DEFAULT_WAIT_MS
from .base import BaseAdapter

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


def _same(a: Any, b: Any) -> bool:
    if a is b or bool(a == b):
        return True
    # NaN never equals itself but is not a change
    return (
        isinstance(a, float)
        and isinstance(b, float)
        and math.isnan(a)
        and math.isnan(b)
    )


class DebouncedValue(BaseAdapter):
    """
    Debounced view of a changing value.

    Feed input with :meth:`set`. Every change (compared with ``is`` or
    ``==``, with NaN equal to NaN) counts as one call; setting the value it
    already has does nothing. :attr:`value` holds the committed value, which starts as
    *initial* and is replaced whenever the scheduler invokes. Listeners
    registered with :meth:`subscribe` receive each committed value.

    A listener that raises is treated like a failing operation: the error
    propagates from ``set``/``flush`` on synchronous edges and goes to
    ``on_error`` on the trailing edge. Listeners after the failing one are
    not notified for that commit.

    Example:
        term = DebouncedValue("", 300)
        term.subscribe(run_search)
        term.set("p")
        term.set("py")     # run_search("py") 300ms later
    """

    def __init__(
        self,
        initial: Any,
        wait: float | None = DEFAULT_WAIT_MS,
        **options: Any,
    ) -> None:
        self._value = initial
        self._latest = initial
        self._listeners: list[Listener] = []
        super().__init__(wait=wait, **options)

    @property
    def value(self) -> Any:
        """The committed value."""
        return self._value

    def set(self, value: Any) -> Any:
        """
        Feed a new input value.

        Returns:
            The committed value after this call
        """
        if _same(value, self._latest):
            return self._value
        self._latest = value
        self._scheduler.call(value)
        return self._value

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register *listener* for committed values.

        Returns:
            A function that removes the listener; calling it twice is safe
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _run(self, payload: Any) -> Any:
        self._value = payload
        for listener in list(self._listeners):
            listener(payload)
        return payload


__all__ = ["DebouncedValue", "Listener"]
