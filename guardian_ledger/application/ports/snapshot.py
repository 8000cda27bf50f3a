"""Snapshot port for stores that take part in ledger transactions.

The LedgerSequencer snapshots every registered store when a transaction
begins and restores the snapshot if the transaction fails.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SnapshotCapable(Protocol):
    """A store whose full state can be captured and restored."""

    def snapshot(self) -> object:
        """Capture the full store state.

        Returns:
            An opaque value only meaningful to restore() on the same store.
        """
        ...

    def restore(self, snapshot: object) -> None:
        """Replace the store state with a previously captured snapshot."""
        ...
