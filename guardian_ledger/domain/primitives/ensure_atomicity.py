"""Ledger primitive: all-or-nothing operations.

This module provides an async context manager that registers undo handlers
while an operation runs. If the body raises, every handler runs in reverse
registration order and the original exception propagates unchanged, so the
caller observes either the complete effect or none of it.

The LedgerSequencer registers one handler per store (restoring the snapshot
taken when the transaction began).

Usage:
    async with AtomicOperationContext() as ctx:
        ctx.add_rollback(lambda: store.restore(snapshot))
        await mutate(store)
        # On exception: store restored, exception re-raised
"""

import inspect
from collections.abc import Callable, Coroutine
from types import TracebackType
from typing import Any

import structlog

log = structlog.get_logger()

# Rollback handlers may be plain callables or coroutine functions
RollbackHandler = Callable[[], None] | Callable[[], Coroutine[Any, Any, None]]


class AtomicOperationContext:
    """Context manager that undoes registered effects on failure.

    Handlers are executed last-in first-out. A handler that itself fails is
    logged and skipped so the remaining handlers still run; the exception
    raised by the body is what propagates.

    Example:
        >>> async def example():
        ...     async with AtomicOperationContext() as ctx:
        ...         ctx.add_rollback(lambda: print("undo"))
        ...         raise ValueError("boom")
        # Output: undo
        # Then ValueError is re-raised

    Attributes:
        _rollback_handlers: Registered handlers, in registration order.
    """

    def __init__(self) -> None:
        """Initialize with no registered handlers."""
        self._rollback_handlers: list[RollbackHandler] = []

    @property
    def rollback_count(self) -> int:
        """Number of handlers currently registered."""
        return len(self._rollback_handlers)

    def add_rollback(self, handler: RollbackHandler) -> None:
        """Register an undo handler.

        Args:
            handler: A zero-argument callable, sync or async.
        """
        self._rollback_handlers.append(handler)

    async def __aenter__(self) -> "AtomicOperationContext":
        """Enter the context and return self for handler registration."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        """Run undo handlers if the body raised.

        Args:
            exc_type: The exception type, if an exception was raised.
            exc_val: The exception instance, if an exception was raised.
            exc_tb: The traceback, if an exception was raised.

        Returns:
            False, so any exception from the body propagates.
        """
        if exc_val is None:
            return False

        log.info(
            "atomic_operation_rolling_back",
            error=str(exc_val),
            error_type=exc_type.__name__ if exc_type else "Unknown",
            rollback_count=len(self._rollback_handlers),
        )

        for handler in reversed(self._rollback_handlers):
            try:
                if inspect.iscoroutinefunction(handler):
                    await handler()
                else:
                    result = handler()
                    if inspect.isawaitable(result):
                        await result
            except Exception as rollback_error:
                log.error(
                    "rollback_handler_failed",
                    rollback_error=str(rollback_error),
                    rollback_error_type=type(rollback_error).__name__,
                )

        return False
