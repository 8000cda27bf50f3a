"""In-memory token balances, supply and receipt journal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from guardian_ledger.application.ports.token_store import TokenStoreProtocol
from guardian_ledger.domain.models.token import TransferReceipt


@dataclass(frozen=True)
class _TokenStoreSnapshot:
    balances: dict[str, int]
    total_supply: int
    receipts: dict[str, TransferReceipt]


class InMemoryTokenStore(TokenStoreProtocol):
    """Dict-backed implementation of TokenStoreProtocol."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._balances: dict[str, int] = {}
        self._total_supply = 0
        self._receipts: dict[str, TransferReceipt] = {}

    async def balance_of(self, address: str) -> int:
        """Return the balance of address (0 if never credited)."""
        return self._balances.get(address, 0)

    async def set_balance(self, address: str, amount: int) -> None:
        """Overwrite the balance of address."""
        self._balances[address] = amount

    async def total_supply(self) -> int:
        """Return the total supply."""
        return self._total_supply

    async def set_total_supply(self, amount: int) -> None:
        """Overwrite the total supply."""
        self._total_supply = amount

    async def append_receipt(self, receipt: TransferReceipt) -> None:
        """Append a receipt to the journal.

        Raises:
            ValueError: If a receipt with the same tx_ref exists.
        """
        if receipt.tx_ref in self._receipts:
            raise ValueError(f"Duplicate receipt reference: {receipt.tx_ref}")
        self._receipts[receipt.tx_ref] = receipt

    async def get_receipt(self, tx_ref: str) -> TransferReceipt | None:
        """Return the receipt for tx_ref, or None."""
        return self._receipts.get(tx_ref)

    def sum_of_balances(self) -> int:
        """Return the sum of all balances (for supply invariant checks)."""
        return sum(self._balances.values())

    def snapshot(self) -> _TokenStoreSnapshot:
        """Capture balances, supply and journal."""
        return _TokenStoreSnapshot(
            balances=dict(self._balances),
            total_supply=self._total_supply,
            receipts=dict(self._receipts),
        )

    def restore(self, snapshot: object) -> None:
        """Restore a snapshot taken by snapshot()."""
        snapshot = cast(_TokenStoreSnapshot, snapshot)
        self._balances = dict(snapshot.balances)
        self._total_supply = snapshot.total_supply
        self._receipts = dict(snapshot.receipts)
