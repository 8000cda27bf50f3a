"""In-memory store of consumed stake references."""

from __future__ import annotations

from typing import cast

from guardian_ledger.application.ports.stake_evidence_repository import (
    StakeEvidenceRepositoryProtocol,
)
from guardian_ledger.domain.errors import StakeReplayError
from guardian_ledger.domain.models.stake import StakeEvidence


class InMemoryStakeEvidenceRepository(StakeEvidenceRepositoryProtocol):
    """Dict-backed implementation of StakeEvidenceRepositoryProtocol.

    The tx_ref key doubles as the uniqueness constraint: a second save for
    the same reference fails regardless of who presents it.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._evidence: dict[str, StakeEvidence] = {}

    async def get(self, tx_ref: str) -> StakeEvidence | None:
        """Return the evidence that consumed tx_ref, or None."""
        return self._evidence.get(tx_ref)

    async def save(self, evidence: StakeEvidence) -> None:
        """Record evidence.

        Raises:
            StakeReplayError: If tx_ref was already consumed.
        """
        existing = self._evidence.get(evidence.tx_ref)
        if existing is not None:
            raise StakeReplayError(evidence.tx_ref, existing.registrant, evidence.registrant)
        self._evidence[evidence.tx_ref] = evidence

    async def count(self) -> int:
        """Return the number of consumed references."""
        return len(self._evidence)

    def snapshot(self) -> dict[str, StakeEvidence]:
        """Capture the store."""
        return dict(self._evidence)

    def restore(self, snapshot: object) -> None:
        """Restore a snapshot taken by snapshot()."""
        self._evidence = dict(cast(dict[str, StakeEvidence], snapshot))
