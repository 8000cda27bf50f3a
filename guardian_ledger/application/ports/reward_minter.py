"""Reward minter port used by the report ledger and the faucet."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from guardian_ledger.domain.models.token import TransferReceipt


class RewardMinterProtocol(Protocol):
    """Anything that can mint tokens on behalf of an allowlisted minter."""

    @abstractmethod
    async def mint(
        self,
        caller: str,
        to: str,
        amount: int,
        *,
        reason: str,
    ) -> TransferReceipt:
        """Mint amount to `to`, authorized as caller.

        Raises:
            UnauthorizedError: If caller is not an allowlisted minter.
        """
        ...
