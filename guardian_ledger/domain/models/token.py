"""Incentive token domain models.

Amounts are integers in base units. With 18 decimals, one whole token is
10**18 base units; rewards and stakes are configured in base units so no
arithmetic ever touches floats.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from guardian_ledger.domain.primitives import DeletePreventionMixin

# Number of decimals of the incentive token
TOKEN_DECIMALS: int = 18

# One whole token in base units
ONE_TOKEN: int = 10**TOKEN_DECIMALS


def tokens(whole: int | str) -> int:
    """Convert a whole or decimal token amount to base units.

    Accepts strings such as "0.5" so that fractional defaults stay exact.

    Args:
        whole: Amount in whole tokens (int or decimal string).

    Returns:
        Amount in base units.

    Raises:
        ValueError: If the string is not a non-negative decimal or has more
            than TOKEN_DECIMALS decimals.
    """
    if isinstance(whole, int):
        return whole * ONE_TOKEN
    integer, _, fraction = whole.strip().partition(".")
    if not (integer or "0").isdigit() or (fraction and not fraction.isdigit()):
        raise ValueError(f"Not a token amount: {whole!r}")
    if len(fraction) > TOKEN_DECIMALS:
        raise ValueError(f"Too many decimals in token amount: {whole!r}")
    fraction = fraction.ljust(TOKEN_DECIMALS, "0")
    return int(integer or "0") * ONE_TOKEN + int(fraction or "0")


@dataclass(frozen=True, eq=True)
class TokenMetadata:
    """Static description of the incentive token.

    Attributes:
        name: Display name.
        symbol: Ticker symbol.
        decimals: Base-unit decimals.
        address: Ledger address of the token component.
    """

    name: str
    symbol: str
    decimals: int
    address: str


class TransferKind(Enum):
    """Kind of token journal entry."""

    MINT = "mint"
    TRANSFER = "transfer"


@dataclass(frozen=True, eq=True)
class TransferReceipt(DeletePreventionMixin):
    """Token journal entry for a committed mint or transfer.

    Attributes:
        tx_ref: Transaction reference (UUIDv7 hex).
        kind: MINT or TRANSFER.
        sender: Debited address; None for mints.
        recipient: Credited address.
        amount: Amount in base units.
        block_height: Height of the transaction that wrote the entry.
    """

    tx_ref: str
    kind: TransferKind
    sender: str | None
    recipient: str
    amount: int
    block_height: int = field(default=0)

    def __post_init__(self) -> None:
        """Validate receipt fields."""
        if self.amount <= 0:
            raise ValueError("Receipt amount must be positive")
        if self.kind is TransferKind.MINT and self.sender is not None:
            raise ValueError("Mint receipts have no sender")
        if self.kind is TransferKind.TRANSFER and self.sender is None:
            raise ValueError("Transfer receipts require a sender")
