# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Scheduler Configuration for the Edge Scheduler

This module provides the user-facing option model (validated with pydantic)
and the resolved, immutable configuration the core scheduler reads.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_WAIT_MS = 500
"""Default wait in milliseconds for every front-end."""


class SchedulerMode(Enum):
    """Preset that determines defaults and the max-wait policy.

    - DEBOUNCE: "Wait for quiet". ``leading`` defaults to False, ``max_wait``
      is optional.
    - THROTTLE: "At most one skip per window, at least one per window".
      Both edges default to True and ``max_wait`` is forced to ``wait``.
    """

    DEBOUNCE = "debounce"
    THROTTLE = "throttle"


def _clamp_non_negative(field_name: str, value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    if value < 0:
        logger.debug(f"Clamping negative {field_name}={value} to 0")
        return 0
    return value


class SchedulerOptions(BaseModel):
    """
    Options accepted by every scheduler front-end.

    Out-of-range numbers are clamped instead of rejected: a missing or
    negative ``wait`` becomes 0, a negative ``max_wait`` becomes 0 (and is
    then raised to ``wait`` when the configuration is resolved). Values of
    the wrong type and unknown option names raise ``ConfigurationError``.

    Attributes:
        wait: Quiet period in milliseconds.
        leading: Invoke on the leading edge. None picks the mode default.
        trailing: Invoke on the trailing edge.
        max_wait: Upper bound in milliseconds on how long an invocation can
            be deferred. None disables the bound (debounce only).
        name: Label used in log lines and metric labels.
        metrics_enabled: Record metrics in the global collector.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    wait: float = DEFAULT_WAIT_MS
    leading: bool | None = None
    trailing: bool = True
    max_wait: float | None = None
    name: str = "default"
    metrics_enabled: bool = False

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid scheduler options: {e}") from e

    @field_validator("wait", mode="before")
    @classmethod
    def _clamp_wait(cls, value: Any) -> Any:
        if value is None:
            return 0
        return _clamp_non_negative("wait", value)

    @field_validator("max_wait", mode="before")
    @classmethod
    def _clamp_max_wait(cls, value: Any) -> Any:
        return _clamp_non_negative("max_wait", value)

    def merged(self, **updates: Any) -> "SchedulerOptions":
        """Return a validated copy with *updates* applied."""
        return SchedulerOptions(**{**self.model_dump(), **updates})


@dataclass(frozen=True)
class SchedulerConfig:
    """
    Resolved configuration read by ``InvocationScheduler``.

    Build it with :meth:`resolve` rather than directly; ``resolve`` applies
    mode defaults and the ``max_wait >= wait`` rule.

    Attributes:
        wait: Quiet period in milliseconds (>= 0).
        leading: Invoke on the leading edge.
        trailing: Invoke on the trailing edge.
        maxing: Whether a max-wait bound is active.
        max_wait: Effective bound in milliseconds, never below ``wait``;
            None when ``maxing`` is False.
    """

    wait: float = DEFAULT_WAIT_MS
    leading: bool = False
    trailing: bool = True
    maxing: bool = False
    max_wait: float | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.wait < 0:
            raise ValueError("wait must be non-negative")
        if self.maxing and (self.max_wait is None or self.max_wait < self.wait):
            raise ValueError("max_wait must be set and >= wait when maxing")
        if not self.maxing and self.max_wait is not None:
            raise ValueError("max_wait must be None when maxing is False")

    @classmethod
    def resolve(
        cls,
        options: SchedulerOptions | None = None,
        mode: SchedulerMode = SchedulerMode.DEBOUNCE,
    ) -> "SchedulerConfig":
        """
        Resolve user options into an effective configuration.

        Args:
            options: User options (defaults if None)
            mode: Debounce or throttle preset

        Returns:
            Frozen SchedulerConfig
        """
        if options is None:
            options = SchedulerOptions()

        wait = options.wait

        if mode is SchedulerMode.THROTTLE:
            if options.max_wait is not None:
                logger.debug(
                    f"Ignoring max_wait={options.max_wait} for throttle "
                    f"'{options.name}'; throttle forces max_wait=wait"
                )
            leading = True if options.leading is None else options.leading
            return cls(
                wait=wait,
                leading=leading,
                trailing=options.trailing,
                maxing=True,
                max_wait=wait,
            )

        leading = False if options.leading is None else options.leading
        maxing = options.max_wait is not None
        return cls(
            wait=wait,
            leading=leading,
            trailing=options.trailing,
            maxing=maxing,
            max_wait=max(options.max_wait, wait) if maxing else None,  # type: ignore[type-var]
        )


__all__ = [
    "DEFAULT_WAIT_MS",
    "SchedulerConfig",
    "SchedulerMode",
    "SchedulerOptions",
]
