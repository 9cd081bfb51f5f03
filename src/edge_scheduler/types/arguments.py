# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Call arguments captured by the callback adapters."""

from collections.abc import Callable
from typing import Any, NamedTuple


class CallArguments(NamedTuple):
    """Positional and keyword arguments of one debounced call.

    The core scheduler works with a single payload per call; callback
    adapters pack ``*args, **kwargs`` into this tuple and unpack it again
    when the wrapped callback finally runs.
    """

    args: tuple[Any, ...]
    kwargs: dict[str, Any]

    @classmethod
    def capture(cls, *args: Any, **kwargs: Any) -> "CallArguments":
        return cls(args, kwargs)

    def apply(self, func: Callable[..., Any]) -> Any:
        """Call *func* with the captured arguments."""
        return func(*self.args, **self.kwargs)


__all__ = ["CallArguments"]
