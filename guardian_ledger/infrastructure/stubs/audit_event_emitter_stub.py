"""In-memory audit event emitter for testing.

Records every published event with its block height so tests can assert
exactly what a committed operation emitted, and that a reverted one
emitted nothing.

WARNING: This stub is NOT for production use.
"""

from __future__ import annotations

from dataclasses import dataclass

from guardian_ledger.application.ports.audit_event_emitter import (
    AuditEventEmitterProtocol,
    LedgerEvent,
)


@dataclass(frozen=True)
class EmittedEvent:
    """A recorded emission."""

    event: LedgerEvent
    block_height: int


class AuditEventEmitterStub(AuditEventEmitterProtocol):
    """Recording implementation of AuditEventEmitterProtocol.

    Usage:
        emitter = AuditEventEmitterStub()
        ...
        assert emitter.event_types() == ["identity.user_registered"]
        emitter.set_fail_on_emit(True)  # simulate a broken sink
    """

    def __init__(self) -> None:
        """Initialize with no recorded events."""
        self.emitted: list[EmittedEvent] = []
        self._fail_on_emit = False

    async def emit(self, event: LedgerEvent, *, block_height: int) -> None:
        """Record one event.

        Raises:
            RuntimeError: If set_fail_on_emit(True) was called.
        """
        if self._fail_on_emit:
            raise RuntimeError("Simulated audit sink failure")
        self.emitted.append(EmittedEvent(event=event, block_height=block_height))

    def set_fail_on_emit(self, fail: bool) -> None:
        """Make subsequent emits raise."""
        self._fail_on_emit = fail

    def events(self) -> list[LedgerEvent]:
        """Return recorded events in order."""
        return [emitted.event for emitted in self.emitted]

    def event_types(self) -> list[str]:
        """Return recorded event types in order."""
        return [emitted.event.event_type for emitted in self.emitted]

    def events_of_type(self, event_type: str) -> list[LedgerEvent]:
        """Return recorded events of one type."""
        return [e.event for e in self.emitted if e.event.event_type == event_type]

    def clear(self) -> None:
        """Clear recorded events (for testing)."""
        self.emitted.clear()
        self._fail_on_emit = False
