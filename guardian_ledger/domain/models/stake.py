"""Stake transfer and evidence models used by the stake gate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from guardian_ledger.domain.primitives import DeletePreventionMixin


class TransferConfirmation(Enum):
    """Finality state of an observed transfer.

    PENDING: Seen but not yet final (too few confirmations)
    CONFIRMED: Final; may be consumed as stake
    FAILED: Reverted or otherwise permanently unusable
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


@dataclass(frozen=True, eq=True)
class StakeTransfer:
    """A transfer as reported by the transfer source.

    Attributes:
        tx_ref: Transaction reference presented by the registrant.
        sender: Debited address.
        recipient: Credited address.
        amount: Amount in base units.
        confirmation: Finality state.
        confirmations: Confirmation depth (0 when pending or failed).
    """

    tx_ref: str
    sender: str
    recipient: str
    amount: int
    confirmation: TransferConfirmation
    confirmations: int = 0

    @property
    def is_final(self) -> bool:
        """True once the transfer may be consumed."""
        return self.confirmation is TransferConfirmation.CONFIRMED


@dataclass(frozen=True, eq=True)
class StakeEvidence(DeletePreventionMixin):
    """Record of a transfer consumed to grant verification.

    Each evidence record maps one-to-one onto a verification grant; a
    tx_ref is never consumed twice.

    Attributes:
        tx_ref: Consumed transaction reference.
        registrant: Identity the stake verified.
        amount: Staked amount in base units.
        consumed_at: When the gate consumed the transfer (UTC).
        block_height: Height of the transaction that consumed it.
    """

    tx_ref: str
    registrant: str
    amount: int
    consumed_at: datetime
    block_height: int
