# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Imperative front-end: a callable wrapper around a debounced function.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

from ..scheduler.config import DEFAULT_WAIT_MS
from ..types.arguments import CallArguments
from .base import BaseAdapter

logger = logging.getLogger(__name__)


class DebouncedCallback(BaseAdapter):
    """
    Callable that forwards to *callback* according to debounce timing.

    Calling the wrapper records its arguments; the callback runs later with
    the arguments of the most recent call (or immediately with
    ``leading=True``). The return value of a call is the result of the
    most recent invocation, which is None until the callback has run once.

    ``callback`` can be replaced at any time. The replacement is the one a
    pending invocation uses.

    Example:
        search = DebouncedCallback(run_search, 300)
        search("p")
        search("py")      # run_search("py") 300ms later
        search.flush()    # ... or right now

    Note:
        An instance wraps a single function. To debounce a method per
        object, create the wrapper in ``__init__``.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        wait: float | None = DEFAULT_WAIT_MS,
        **options: Any,
    ) -> None:
        """
        Initialize the wrapper.

        Args:
            callback: Function to debounce
            wait: Quiet period in milliseconds
            **options: ``leading``, ``trailing``, ``max_wait``, ``clock``,
                ``on_error``, ``name``, ``metrics_enabled`` or
                ``metrics_collector``
        """
        self._callback = callback
        functools.update_wrapper(self, callback, updated=())
        super().__init__(wait=wait, **options)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._scheduler.call(CallArguments.capture(*args, **kwargs))

    def _run(self, payload: CallArguments) -> Any:
        return payload.apply(self._callback)

    @property
    def callback(self) -> Callable[..., Any]:
        return self._callback

    @callback.setter
    def callback(self, callback: Callable[..., Any]) -> None:
        self._callback = callback

    @property
    def result(self) -> Any:
        """Result of the most recent invocation."""
        return self._scheduler.last_result


def debounced(
    func: Callable[..., Any] | None = None,
    /,
    *,
    wait: float | None = DEFAULT_WAIT_MS,
    **options: Any,
) -> Any:
    """
    Decorator form of :class:`DebouncedCallback`.

    Works bare or with options:

        @debounced
        def save(doc): ...

        @debounced(wait=1000, max_wait=5000)
        def autosave(doc): ...
    """

    def decorator(fn: Callable[..., Any]) -> DebouncedCallback:
        return DebouncedCallback(fn, wait, **options)

    if func is not None:
        return decorator(func)
    return decorator


__all__ = ["DebouncedCallback", "debounced"]
