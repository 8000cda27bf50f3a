"""Audit event emitter port.

Ledger services never talk to the emitter directly. They record events on
the current LedgerTransaction and the sequencer publishes them here once
the transaction has committed, so a reverted operation emits nothing.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class LedgerEvent(Protocol):
    """Structural type shared by all domain event payloads."""

    @property
    def event_type(self) -> str:
        """Dotted event type (e.g. "report.submitted")."""
        ...

    def to_dict(self) -> dict[str, object]:
        """Serializable payload."""
        ...


class AuditEventEmitterProtocol(Protocol):
    """Sink for committed audit events."""

    @abstractmethod
    async def emit(self, event: LedgerEvent, *, block_height: int) -> None:
        """Publish one committed event.

        Args:
            event: The event payload.
            block_height: Height of the transaction that produced it.
        """
        ...
