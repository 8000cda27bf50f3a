"""Transfer source port for the stake gate.

The stake gate asks the transfer source what a transaction reference
refers to. The answer may be "unknown" or "pending" for a while after the
registrant pays; the gate polls with bounded retries.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from guardian_ledger.domain.models.stake import StakeTransfer


class TransferSourceProtocol(Protocol):
    """Read-only view of token transfers by reference."""

    @abstractmethod
    async def get_transfer(self, tx_ref: str) -> StakeTransfer | None:
        """Look up a transfer.

        Args:
            tx_ref: Reference presented by the registrant.

        Returns:
            The transfer, or None if the source has not seen it (yet).

        Raises:
            TransferSourceUnavailableError: If the source cannot answer now.
        """
        ...
