"""Ledger sequencer: serialized, atomic ledger transactions.

Every state-changing ledger operation runs inside
``LedgerSequencer.transaction(operation)``. The sequencer:

1. Serializes transactions behind a single lock
2. Snapshots every registered store when a transaction begins
3. Buffers the audit events the operation records
4. On success, advances the block height and publishes the buffered events
5. On failure, restores every snapshot, discards the events and re-raises

A transaction opened while another is active in the same task joins the
outer one. This is how the report ledger mints rewards through the token
service: the mint is part of the status change or claim, and a failure
anywhere reverts both.

Cost: every outer transaction snapshots every registered store, read-only
ones such as a refused get_content included. With the in-memory stores a
snapshot is a shallow dict copy, so one operation is O(ledger size) and N
submissions are O(N^2). Nested transactions take no snapshots. A store
backed by a real database should implement snapshot()/restore() on top of
its own transaction (savepoint and rollback) rather than copying its
contents.

Ledger Invariants:
- A failed operation leaves every store exactly as it was
- A failed operation publishes no events
- Block height counts committed outer transactions only
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from functools import partial

from structlog import get_logger

from guardian_ledger.application.ports.audit_event_emitter import (
    AuditEventEmitterProtocol,
    LedgerEvent,
)
from guardian_ledger.application.ports.ledger_metrics import LedgerMetricsProtocol
from guardian_ledger.application.ports.snapshot import SnapshotCapable
from guardian_ledger.domain.primitives import AtomicOperationContext

logger = get_logger(__name__)

_current_transaction: ContextVar[LedgerTransaction | None] = ContextVar(
    "ledger_transaction", default=None
)


@dataclass
class LedgerTransaction:
    """An open ledger transaction.

    Attributes:
        operation: Name of the outermost operation (e.g. "report.submit").
        height: Block height this transaction commits at.
        events: Events recorded so far, in order.
    """

    operation: str
    height: int
    events: list[LedgerEvent] = field(default_factory=list)

    def record(self, event: LedgerEvent) -> None:
        """Buffer an event for publication on commit."""
        self.events.append(event)


class LedgerSequencer:
    """Single transaction sequencer for all ledger components.

    Example:
        >>> sequencer = LedgerSequencer(event_emitter=emitter)
        >>> sequencer.register_store(user_repo)
        >>> async with sequencer.transaction("identity.register") as tx:
        ...     await user_repo.save(user)
        ...     tx.record(UserRegisteredEvent(...))
    """

    def __init__(
        self,
        event_emitter: AuditEventEmitterProtocol,
        metrics: LedgerMetricsProtocol | None = None,
    ) -> None:
        """Initialize the sequencer.

        Args:
            event_emitter: Sink for committed events.
            metrics: Optional transaction metrics collector.
        """
        self._event_emitter = event_emitter
        self._metrics = metrics
        self._lock = asyncio.Lock()
        self._stores: list[SnapshotCapable] = []
        self._block_height = 0

    def register_store(self, store: SnapshotCapable) -> None:
        """Enroll a store in every future transaction's snapshot.

        Args:
            store: The store to snapshot and restore.

        Raises:
            TypeError: If store does not implement snapshot/restore.
        """
        if not isinstance(store, SnapshotCapable):
            raise TypeError(f"{type(store).__name__} does not support snapshots")
        if any(existing is store for existing in self._stores):
            return
        self._stores.append(store)

    @property
    def block_height(self) -> int:
        """Number of committed transactions."""
        return self._block_height

    @property
    def current(self) -> LedgerTransaction | None:
        """The transaction open in this task, if any."""
        return _current_transaction.get()

    def require_current(self) -> LedgerTransaction:
        """Return the open transaction.

        Raises:
            RuntimeError: If called outside a transaction.
        """
        tx = _current_transaction.get()
        if tx is None:
            raise RuntimeError("No ledger transaction is open")
        return tx

    @asynccontextmanager
    async def transaction(self, operation: str) -> AsyncGenerator[LedgerTransaction, None]:
        """Run the body as one atomic ledger transaction.

        Args:
            operation: Operation name for logs and metrics.

        Yields:
            The open LedgerTransaction (the outer one when nested).
        """
        outer = _current_transaction.get()
        if outer is not None:
            yield outer
            return

        async with self._lock:
            tx = LedgerTransaction(operation=operation, height=self._block_height + 1)
            token = _current_transaction.set(tx)
            log = logger.bind(operation=operation, height=tx.height)
            try:
                async with AtomicOperationContext() as atomic:
                    for store in self._stores:
                        atomic.add_rollback(partial(store.restore, store.snapshot()))
                    yield tx
            except Exception as e:
                log.warning(
                    "ledger_transaction_rolled_back",
                    error=str(e),
                    error_type=type(e).__name__,
                    discarded_events=len(tx.events),
                )
                if self._metrics is not None:
                    self._metrics.record_rolled_back(operation, type(e).__name__)
                raise
            finally:
                _current_transaction.reset(token)

            self._block_height = tx.height
            log.info("ledger_transaction_committed", events=len(tx.events))
            if self._metrics is not None:
                self._metrics.record_committed(operation, tx.events)
            await self._publish(tx)

    async def _publish(self, tx: LedgerTransaction) -> None:
        """Publish a committed transaction's events in order."""
        for event in tx.events:
            try:
                await self._event_emitter.emit(event, block_height=tx.height)
            except Exception as e:
                logger.error(
                    "audit_event_publish_failed",
                    operation=tx.operation,
                    height=tx.height,
                    event_type=event.event_type,
                    error=str(e),
                )
                raise
