"""Stake gate event payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

STAKE_EVIDENCE_CONSUMED_EVENT_TYPE: Final[str] = "stake.evidence_consumed"


@dataclass(frozen=True, eq=True)
class StakeEvidenceConsumedEvent:
    """Payload for a transfer consumed as stake.

    Emitted in the same transaction as the matching
    identity.user_verified event.

    Attributes:
        tx_ref: Consumed transfer reference.
        registrant: The identity the stake verified.
        amount: Staked amount in base units.
        treasury: Treasury address the stake was paid to.
        consumed_at: Consumption time (UTC).
    """

    tx_ref: str
    registrant: str
    amount: int
    treasury: str
    consumed_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return STAKE_EVIDENCE_CONSUMED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "tx_ref": self.tx_ref,
            "registrant": self.registrant,
            "amount": str(self.amount),
            "treasury": self.treasury,
            "consumed_at": self.consumed_at.isoformat(),
        }
