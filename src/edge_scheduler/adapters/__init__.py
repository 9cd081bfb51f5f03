# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Scheduler front-ends.

Available adapters:
    - DebouncedCallback / debounced: imperative debounce of a function
    - ThrottledCallback / throttled: imperative throttle of a function
    - DebouncedValue: reactive debounce of a changing value
    - ThrottledValue: reactive throttle of a changing value

The base class ``BaseAdapter`` defines the shared lifecycle and
configuration interface.
"""

from typing import Any

from ..exceptions import ConfigurationError
from ..scheduler.config import DEFAULT_WAIT_MS
from .base import BaseAdapter
from .callback import DebouncedCallback, debounced
from .throttle import ThrottledCallback, ThrottledValue, throttled
from .value import DebouncedValue

ADAPTER_KINDS: dict[str, type[BaseAdapter]] = {
    "debounce_callback": DebouncedCallback,
    "throttle_callback": ThrottledCallback,
    "debounce_value": DebouncedValue,
    "throttle_value": ThrottledValue,
}


def create_adapter(
    kind: str,
    target: Any,
    wait: float | None = DEFAULT_WAIT_MS,
    **options: Any,
) -> BaseAdapter:
    """
    Factory function to create an adapter by name.

    Args:
        kind: One of "debounce_callback", "throttle_callback",
            "debounce_value", "throttle_value"
        target: The callback for callback kinds, the initial value for
            value kinds
        wait: Quiet period in milliseconds
        **options: Adapter options (``leading``, ``clock``, ...)

    Returns:
        Configured adapter instance

    Raises:
        ConfigurationError: If kind is unknown or an option is invalid
    """
    adapter_cls = ADAPTER_KINDS.get(kind.lower())
    if adapter_cls is None:
        raise ConfigurationError(
            f"Unknown adapter kind: {kind!r}. "
            f"Expected one of {sorted(ADAPTER_KINDS)}"
        )
    return adapter_cls(target, wait, **options)  # type: ignore[call-arg]


__all__ = [
    "ADAPTER_KINDS",
    "BaseAdapter",
    "DebouncedCallback",
    "DebouncedValue",
    "ThrottledCallback",
    "ThrottledValue",
    "create_adapter",
    "debounced",
    "throttled",
]
