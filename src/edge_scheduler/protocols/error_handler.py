# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the deferred-invocation error channel."""

from typing import Protocol, runtime_checkable

from ..exceptions import DeferredInvocationError


@runtime_checkable
class ErrorHandlerProtocol(Protocol):
    """
    Receives exceptions raised by operations running inside timer callbacks.

    A trailing-edge invocation has no synchronous caller to propagate to.
    When a handler is registered the scheduler wraps the exception in
    :class:`DeferredInvocationError` and calls the handler instead of
    re-raising into the clock's callback context.
    """

    def __call__(self, error: DeferredInvocationError) -> None:
        ...
