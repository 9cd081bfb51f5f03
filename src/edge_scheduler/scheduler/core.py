# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Invocation scheduler shared by every debounce and throttle front-end.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..exceptions import DeferredInvocationError, SchedulerDisposedError
from ..observability.collector import get_metrics_collector
from ..observability.constants import (
    CALLS_TOTAL,
    CANCELLATIONS_TOTAL,
    DEFERRED_ERRORS_TOTAL,
    FLUSHES_TOTAL,
    INVOCATION_DELAY_SECONDS,
    INVOCATIONS_TOTAL,
    PENDING_TIMERS,
    TIMER_REARMS_TOTAL,
)
from ..observability.protocols import MetricsCollectorProtocol
from ..protocols.clock import ClockProtocol
from ..protocols.error_handler import ErrorHandlerProtocol
from ..types.edge import InvocationEdge
from ..types.state import NO_PAYLOAD, SchedulerState
from .config import SchedulerConfig

logger = logging.getLogger(__name__)


class InvocationScheduler:
    """
    Decides when a wrapped operation runs, given a stream of calls.

    Every call records its payload and the call time. Depending on the
    configuration the operation then runs immediately (leading edge), once
    the calls have been quiet for ``wait`` ms (trailing edge), or at least
    once per ``max_wait`` ms while calls keep arriving. The trailing edge
    always receives the most recent payload.

    A call that starts a new window runs the leading edge and arms the
    timer. The payload stays pending, so with ``leading=True`` and
    ``trailing=True`` a single isolated call invokes the operation twice with
    the same payload: once immediately and once when the timer expires.
    Front-ends that want one invocation per isolated call must disable one
    of the edges.

    ``config`` and ``operation`` are plain attributes read when the timer
    fires, so replacing either one takes effect without disturbing an armed
    timer.

    Error handling:
        Exceptions from a synchronous invocation (inside ``call`` or
        ``flush``) propagate to the caller. Exceptions from a timer callback
        are wrapped in ``DeferredInvocationError`` and passed to ``on_error``;
        without a handler they are logged and re-raised into the clock.

    Example:
        clock = ManualClock()
        scheduler = InvocationScheduler(print, SchedulerConfig(wait=500), clock)
        scheduler.call("a")
        scheduler.call("b")
        clock.advance(500)   # prints "b"
    """

    def __init__(
        self,
        operation: Callable[[Any], Any],
        config: SchedulerConfig,
        clock: ClockProtocol,
        *,
        on_error: ErrorHandlerProtocol | None = None,
        metrics_collector: MetricsCollectorProtocol | None = None,
        metrics_enabled: bool = False,
        name: str = "default",
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            operation: Callable receiving the payload of the invoking call
            config: Resolved timing configuration
            clock: Time source and timer facility
            on_error: Receives failures from deferred invocations
            metrics_collector: Collector to record metrics in
            metrics_enabled: Use the global collector when none is given
            name: Label for logs and metrics
        """
        self.operation = operation
        self.config = config
        self.clock = clock
        self.on_error = on_error
        self.name = name

        if metrics_collector is None and metrics_enabled:
            metrics_collector = get_metrics_collector()
        self._metrics = metrics_collector
        self._labels = {"scheduler": name}

        self._state = SchedulerState()
        self._disposed = False

    # === Public API ===

    def call(self, payload: Any) -> Any:
        """
        Record a call and invoke or schedule the operation.

        Returns:
            The result of the most recent invocation, which is the result of
            this call only when it invoked synchronously.

        Raises:
            SchedulerDisposedError: If the scheduler has been disposed
        """
        if self._disposed:
            raise SchedulerDisposedError(self.name)

        state = self._state
        t = self.clock.now()
        is_invoking = self._should_invoke(t)

        state.last_call_time = t
        state.pending_payload = payload
        self._record_counter(CALLS_TOTAL)

        if is_invoking:
            if not state.timer_armed:
                return self._leading_edge(t)
            if self.config.maxing:
                logger.debug(
                    f"Scheduler '{self.name}' max_wait elapsed mid-flight at t={t}"
                )
                self.clock.unschedule(state.timer_handle)
                self._clear_timer()
                self._arm_timer(self.config.wait)
                if self.config.leading or self.config.trailing:
                    return self._invoke(payload, t, InvocationEdge.MAX_WAIT)
                return state.last_result

        if not state.timer_armed:
            self._arm_timer(self._remaining_wait(t))
        return state.last_result

    def cancel(self) -> None:
        """Drop the armed timer and pending payload and forget call history."""
        state = self._state
        if state.timer_armed:
            self.clock.unschedule(state.timer_handle)
            self._clear_timer()
            self._record_counter(CANCELLATIONS_TOTAL)
            logger.debug(f"Scheduler '{self.name}' cancelled pending invocation")
        state.reset_timing()

    def flush(self) -> Any:
        """
        Run the trailing edge now if a timer is armed.

        Returns:
            The result of the most recent invocation
        """
        state = self._state
        if not state.timer_armed:
            return state.last_result

        self.clock.unschedule(state.timer_handle)
        self._clear_timer()
        self._record_counter(FLUSHES_TOTAL)
        logger.debug(f"Scheduler '{self.name}' flushing")
        return self._trailing_edge(self.clock.now(), InvocationEdge.FLUSH)

    def pending(self) -> bool:
        return self._state.timer_armed

    def dispose(self) -> None:
        """Cancel and reject every further call. Idempotent."""
        if self._disposed:
            return
        self.cancel()
        self._disposed = True
        logger.debug(f"Scheduler '{self.name}' disposed")

    @property
    def last_result(self) -> Any:
        return self._state.last_result

    @property
    def state(self) -> SchedulerState:
        """Copy of the current state, for inspection."""
        return self._state.snapshot()

    @property
    def disposed(self) -> bool:
        return self._disposed

    # === Timing ===

    def _should_invoke(self, t: float) -> bool:
        state = self._state
        if state.last_call_time is None:
            return True

        since_last_call = t - state.last_call_time
        if since_last_call >= self.config.wait or since_last_call < 0:
            return True

        return (
            self.config.maxing
            and t - state.last_invoke_time >= self.config.max_wait  # type: ignore[operator]
        )

    def _remaining_wait(self, t: float) -> float:
        state = self._state
        if state.last_call_time is None:
            return self.config.wait

        waiting = self.config.wait - (t - state.last_call_time)
        if not self.config.maxing:
            return waiting
        max_waiting = self.config.max_wait - (t - state.last_invoke_time)  # type: ignore[operator]
        return min(waiting, max_waiting)

    def _arm_timer(self, delay_ms: float) -> None:
        was_armed = self._state.timer_armed
        self._state.timer_handle = self.clock.schedule(delay_ms, self._timer_expired)
        if not was_armed and self._metrics is not None:
            self._metrics.inc_gauge(PENDING_TIMERS, labels=self._labels)

    def _clear_timer(self) -> None:
        if self._state.timer_armed and self._metrics is not None:
            self._metrics.dec_gauge(PENDING_TIMERS, labels=self._labels)
        self._state.timer_handle = None

    # === Edges ===

    def _leading_edge(self, t: float) -> Any:
        state = self._state
        state.last_invoke_time = t
        self._arm_timer(self.config.wait)
        if self.config.leading:
            logger.debug(f"Scheduler '{self.name}' leading edge at t={t}")
            return self._invoke(state.pending_payload, t, InvocationEdge.LEADING)
        return state.last_result

    def _trailing_edge(self, t: float, edge: InvocationEdge) -> Any:
        state = self._state
        self._clear_timer()
        has_payload = state.has_pending_payload
        payload = state.pending_payload
        state.pending_payload = NO_PAYLOAD
        if not (self.config.trailing and has_payload):
            return state.last_result

        logger.debug(f"Scheduler '{self.name}' {edge.value} edge at t={t}")
        try:
            return self._invoke(payload, t, edge)
        except Exception as e:
            if not edge.is_deferred:
                raise
            self._handle_deferred_error(e, edge)
            return state.last_result

    def _timer_expired(self) -> None:
        self._clear_timer()
        t = self.clock.now()

        if not self._should_invoke(t):
            delay = self._remaining_wait(t)
            logger.debug(
                f"Scheduler '{self.name}' re-arming for {delay}ms at t={t}"
            )
            self._arm_timer(delay)
            self._record_counter(TIMER_REARMS_TOTAL)
            return

        self._trailing_edge(t, InvocationEdge.TRAILING)

    def _invoke(self, payload: Any, t: float, edge: InvocationEdge) -> Any:
        state = self._state
        delay = 0.0 if state.last_call_time is None else max(0.0, t - state.last_call_time)
        state.last_invoke_time = t
        state.last_result = self.operation(payload)

        if self._metrics is not None:
            labels = {**self._labels, "edge": edge.value}
            self._metrics.inc_counter(INVOCATIONS_TOTAL, labels=labels)
            self._metrics.observe_histogram(
                INVOCATION_DELAY_SECONDS, delay / 1000.0, labels=labels
            )
        return state.last_result

    # === Errors and metrics ===

    def _handle_deferred_error(self, error: Exception, edge: InvocationEdge) -> None:
        wrapped = DeferredInvocationError(error, edge, self.name)
        wrapped.__cause__ = error

        if self._metrics is not None:
            self._metrics.inc_counter(
                DEFERRED_ERRORS_TOTAL, labels={**self._labels, "edge": edge.value}
            )

        if self.on_error is not None:
            self.on_error(wrapped)
            return

        logger.error(f"Unhandled error in scheduler '{self.name}': {error!r}")
        raise wrapped from error

    def _record_counter(self, name: str) -> None:
        if self._metrics is not None:
            self._metrics.inc_counter(name, labels=self._labels)

    def __repr__(self) -> str:
        return (
            f"InvocationScheduler(name={self.name!r}, config={self.config!r}, "
            f"pending={self.pending()})"
        )


__all__ = ["InvocationScheduler"]
