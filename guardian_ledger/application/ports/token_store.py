"""Token store port for the incentive token."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from guardian_ledger.domain.models.token import TransferReceipt


class TokenStoreProtocol(Protocol):
    """Balances, total supply and the receipt journal.

    The store does no validation; IncentiveTokenService keeps total supply
    equal to the sum of balances.
    """

    @abstractmethod
    async def balance_of(self, address: str) -> int:
        """Return the balance of address (0 if never credited)."""
        ...

    @abstractmethod
    async def set_balance(self, address: str, amount: int) -> None:
        """Overwrite the balance of address."""
        ...

    @abstractmethod
    async def total_supply(self) -> int:
        """Return the total supply."""
        ...

    @abstractmethod
    async def set_total_supply(self, amount: int) -> None:
        """Overwrite the total supply."""
        ...

    @abstractmethod
    async def append_receipt(self, receipt: TransferReceipt) -> None:
        """Append a receipt to the journal."""
        ...

    @abstractmethod
    async def get_receipt(self, tx_ref: str) -> TransferReceipt | None:
        """Return the receipt for tx_ref, or None."""
        ...
