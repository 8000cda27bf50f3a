"""In-memory faucet claim bookkeeping."""

from __future__ import annotations

from datetime import datetime
from typing import cast

from guardian_ledger.application.ports.faucet_claim_repository import (
    FaucetClaimRepositoryProtocol,
)


class InMemoryFaucetClaimRepository(FaucetClaimRepositoryProtocol):
    """Dict-backed implementation of FaucetClaimRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with no claims."""
        self._last_claims: dict[str, datetime] = {}

    async def get_last_claim(self, address: str) -> datetime | None:
        """Return when address last claimed, or None."""
        return self._last_claims.get(address)

    async def record_claim(self, address: str, claimed_at: datetime) -> None:
        """Record a claim by address at claimed_at."""
        self._last_claims[address] = claimed_at

    def snapshot(self) -> dict[str, datetime]:
        """Capture the claim times."""
        return dict(self._last_claims)

    def restore(self, snapshot: object) -> None:
        """Restore a snapshot taken by snapshot()."""
        self._last_claims = dict(cast(dict[str, datetime], snapshot))
