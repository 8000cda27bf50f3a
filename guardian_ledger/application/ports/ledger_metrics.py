"""Ledger metrics port."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from guardian_ledger.application.ports.audit_event_emitter import LedgerEvent


class LedgerMetricsProtocol(Protocol):
    """Receives the outcome of every ledger transaction."""

    def record_committed(self, operation: str, events: Sequence[LedgerEvent]) -> None:
        """Record a committed transaction and the events it produced."""
        ...

    def record_rolled_back(self, operation: str, error_type: str) -> None:
        """Record a transaction that was rolled back."""
        ...
