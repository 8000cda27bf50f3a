"""Incentive token event payloads.

Amounts are serialized as decimal strings; 18-decimal values overflow
the integer range of most JSON consumers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

TOKENS_MINTED_EVENT_TYPE: Final[str] = "token.minted"
TOKENS_TRANSFERRED_EVENT_TYPE: Final[str] = "token.transferred"
MINTER_ALLOWLIST_CHANGED_EVENT_TYPE: Final[str] = "token.minter_allowlist_changed"

# Mint reasons, used as a low-cardinality metrics label
MINT_REASON_DIRECT: Final[str] = "direct"
MINT_REASON_INITIAL_SUPPLY: Final[str] = "initial_supply"
MINT_REASON_REPORTER_REWARD: Final[str] = "reporter_reward"
MINT_REASON_INVESTIGATOR_REWARD: Final[str] = "investigator_reward"
MINT_REASON_FAUCET: Final[str] = "faucet"


@dataclass(frozen=True, eq=True)
class TokensMintedEvent:
    """Payload for a mint.

    Attributes:
        tx_ref: Journal reference of the mint.
        minter: Allowlisted minter (or admin for the initial supply).
        recipient: Credited address.
        amount: Minted amount in base units.
        reason: Why the tokens were minted.
        total_supply: Total supply after the mint.
    """

    tx_ref: str
    minter: str
    recipient: str
    amount: int
    reason: str
    total_supply: int

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return TOKENS_MINTED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "tx_ref": self.tx_ref,
            "minter": self.minter,
            "recipient": self.recipient,
            "amount": str(self.amount),
            "reason": self.reason,
            "total_supply": str(self.total_supply),
        }


@dataclass(frozen=True, eq=True)
class TokensTransferredEvent:
    """Payload for a transfer between addresses."""

    tx_ref: str
    sender: str
    recipient: str
    amount: int

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return TOKENS_TRANSFERRED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "tx_ref": self.tx_ref,
            "sender": self.sender,
            "recipient": self.recipient,
            "amount": str(self.amount),
        }


@dataclass(frozen=True, eq=True)
class MinterAllowlistChangedEvent:
    """Payload for a minter allowlist change.

    Attributes:
        minter: The address added or removed.
        added: True when added, False when removed.
        changed_by: The admin.
        changed_at: Change time (UTC).
    """

    minter: str
    added: bool
    changed_by: str
    changed_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return MINTER_ALLOWLIST_CHANGED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "minter": self.minter,
            "added": self.added,
            "changed_by": self.changed_by,
            "changed_at": self.changed_at.isoformat(),
        }
