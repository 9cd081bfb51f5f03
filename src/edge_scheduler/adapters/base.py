# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base adapter shared by the callback and value front-ends.

An adapter owns one ``InvocationScheduler``, turns user options into a
resolved ``SchedulerConfig`` and defines what a payload means when the
scheduler invokes it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from typing_extensions import Self

from ..clocks.event_loop import AsyncioClock
from ..exceptions import ConfigurationError
from ..observability.protocols import MetricsCollectorProtocol
from ..protocols.clock import ClockProtocol
from ..protocols.error_handler import ErrorHandlerProtocol
from ..scheduler.config import SchedulerConfig, SchedulerMode, SchedulerOptions
from ..scheduler.core import InvocationScheduler

logger = logging.getLogger(__name__)

# Options fixed at construction; changing them would orphan metric series
_FROZEN_OPTIONS = frozenset({"name", "metrics_enabled"})


class BaseAdapter(ABC):
    """
    Abstract base class for scheduler front-ends.

    Subclasses implement :meth:`_run`, which receives the payload chosen by
    the scheduler and performs the actual work.

    Attributes:
        mode: Preset used to resolve options into a configuration
        allows_max_wait: Whether ``max_wait`` is an accepted option

    Lifecycle:
        ``dispose()`` cancels any pending invocation and rejects further
        calls. Adapters are context managers (sync and async) that dispose
        on exit.

    Example:
        >>> class Printer(BaseAdapter):
        ...     def _run(self, payload):
        ...         print(payload)
        ...         return payload
    """

    mode: ClassVar[SchedulerMode] = SchedulerMode.DEBOUNCE
    allows_max_wait: ClassVar[bool] = True

    def __init__(
        self,
        *,
        clock: ClockProtocol | None = None,
        on_error: ErrorHandlerProtocol | None = None,
        metrics_collector: MetricsCollectorProtocol | None = None,
        **options: Any,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            clock: Clock driving the scheduler (defaults to ``AsyncioClock``)
            on_error: Receives failures from deferred invocations
            metrics_collector: Collector to record metrics in
            **options: Fields of ``SchedulerOptions``

        Raises:
            ConfigurationError: If an option is unknown or has the wrong type
        """
        self._check_max_wait(options)
        self._options = SchedulerOptions(**options)
        self._scheduler = InvocationScheduler(
            self._run,
            SchedulerConfig.resolve(self._options, self.mode),
            clock if clock is not None else AsyncioClock(),
            on_error=on_error,
            metrics_collector=metrics_collector,
            metrics_enabled=self._options.metrics_enabled,
            name=self._options.name,
        )
        logger.info(
            f"{type(self).__name__} '{self.name}' created with "
            f"{self._scheduler.config}"
        )

    @abstractmethod
    def _run(self, payload: Any) -> Any:
        """Perform the work for one invocation and return its result."""

    # === Delegated scheduler operations ===

    def cancel(self) -> None:
        self._scheduler.cancel()

    def flush(self) -> Any:
        """Invoke now if an invocation is pending; return the latest result."""
        return self._scheduler.flush()

    def pending(self) -> bool:
        return self._scheduler.pending()

    # === Configuration ===

    def reconfigure(self, *, reset: bool = False, **options: Any) -> None:
        """
        Change timing options without recreating the adapter.

        The new configuration applies from the next scheduling decision; an
        armed timer keeps running and reads the new configuration when it
        fires. Pass ``reset=True`` to cancel pending work instead.

        Raises:
            ConfigurationError: If an option is unknown, has the wrong type,
                or can only be set at construction
        """
        frozen = _FROZEN_OPTIONS.intersection(options)
        if frozen:
            raise ConfigurationError(
                f"Options {sorted(frozen)} can only be set at construction"
            )
        self._check_max_wait(options)

        self._options = self._options.merged(**options)
        self._scheduler.config = SchedulerConfig.resolve(self._options, self.mode)
        logger.debug(
            f"{type(self).__name__} '{self.name}' reconfigured to "
            f"{self._scheduler.config}"
        )
        if reset:
            self._scheduler.cancel()

    def _check_max_wait(self, options: dict[str, Any]) -> None:
        if not self.allows_max_wait and "max_wait" in options:
            raise ConfigurationError(
                f"{type(self).__name__} does not accept max_wait; "
                "it is always equal to wait"
            )

    @property
    def options(self) -> SchedulerOptions:
        return self._options

    @property
    def config(self) -> SchedulerConfig:
        return self._scheduler.config

    @property
    def scheduler(self) -> InvocationScheduler:
        return self._scheduler

    @property
    def name(self) -> str:
        return self._options.name

    # === Lifecycle ===

    def dispose(self) -> None:
        """Cancel pending work and reject further calls."""
        if self._scheduler.disposed:
            return
        self._scheduler.dispose()
        logger.info(f"{type(self).__name__} '{self.name}' disposed")

    @property
    def disposed(self) -> bool:
        return self._scheduler.disposed

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"config={self.config!r}, pending={self.pending()})"
        )


__all__ = ["BaseAdapter"]
