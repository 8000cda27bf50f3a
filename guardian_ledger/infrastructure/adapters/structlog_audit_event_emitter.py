"""Audit event emitter that writes committed events to the structured log.

Shipping the log stream elsewhere is left to the deployment.
"""

from __future__ import annotations

import structlog

from guardian_ledger.application.ports.audit_event_emitter import (
    AuditEventEmitterProtocol,
    LedgerEvent,
)


class StructlogAuditEventEmitter(AuditEventEmitterProtocol):
    """Emit each committed event as one "audit_event" log line."""

    def __init__(self, logger_name: str = "guardian_ledger.audit") -> None:
        """Initialize the emitter.

        Args:
            logger_name: Name of the audit logger.
        """
        self._log = structlog.get_logger(logger_name)

    async def emit(self, event: LedgerEvent, *, block_height: int) -> None:
        """Log one committed event."""
        self._log.info(
            "audit_event",
            event_type=event.event_type,
            block_height=block_height,
            payload=event.to_dict(),
        )
