"""Stake evidence repository port."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from guardian_ledger.domain.models.stake import StakeEvidence


class StakeEvidenceRepositoryProtocol(Protocol):
    """Consumed transfer references, keyed by tx_ref."""

    @abstractmethod
    async def get(self, tx_ref: str) -> StakeEvidence | None:
        """Return the evidence that consumed tx_ref, or None."""
        ...

    @abstractmethod
    async def save(self, evidence: StakeEvidence) -> None:
        """Record evidence.

        Raises:
            StakeReplayError: If tx_ref was already consumed.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of consumed references."""
        ...
