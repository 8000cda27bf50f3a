"""Faucet claim repository port."""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Protocol


class FaucetClaimRepositoryProtocol(Protocol):
    """Last faucet claim time per address."""

    @abstractmethod
    async def get_last_claim(self, address: str) -> datetime | None:
        """Return when address last claimed, or None."""
        ...

    @abstractmethod
    async def record_claim(self, address: str, claimed_at: datetime) -> None:
        """Record a claim by address at claimed_at."""
        ...
