"""Result DTOs returned by the ledger services.

These are plain frozen dataclasses; guardian_ledger.api maps them onto
pydantic response models for the outer layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from guardian_ledger.domain.models.report import ReportStatus


@dataclass(frozen=True)
class UserStatus:
    """Public status of an identity (never includes the identifier).

    Attributes:
        address: The queried address.
        is_registered: Whether the address has a registry record.
        is_verified: Whether the address is verified.
        created_at: Registration time, None if unregistered.
        verified_at: Verification time, None until verified.
        longevity: Declared longevity, 0 if unregistered.
    """

    address: str
    is_registered: bool
    is_verified: bool
    created_at: datetime | None = None
    verified_at: datetime | None = None
    longevity: int = 0


@dataclass(frozen=True)
class StakeVerificationResult:
    """Outcome of StakeGateService.verify_stake.

    Attributes:
        registrant: The verified identity.
        tx_ref: The consumed transfer reference.
        amount: Staked amount in base units.
        verified_at: When the stake was consumed.
        already_applied: True when the reference had already verified this
            registrant and the call changed nothing.
        attempts: Number of transfer source polls made.
    """

    registrant: str
    tx_ref: str
    amount: int
    verified_at: datetime
    already_applied: bool = False
    attempts: int = 0


@dataclass(frozen=True)
class VerificationRequirements:
    """What a registrant must pay to be verified by stake."""

    stake_amount: int
    treasury_address: str
    token_address: str
    required_confirmations: int


@dataclass(frozen=True)
class LedgerStats:
    """Aggregate ledger counters.

    Attributes:
        total_reports: Reports ever submitted.
        total_users: Registered identities.
        reports_by_status: Current count per status (every status present).
        total_supply: Token total supply in base units.
        block_height: Committed transactions.
    """

    total_reports: int
    total_users: int
    reports_by_status: dict[ReportStatus, int] = field(default_factory=dict)
    total_supply: int = 0
    block_height: int = 0


@dataclass(frozen=True)
class FaucetStatus:
    """Whether an address may draw from the faucet now."""

    address: str
    can_claim: bool
    seconds_remaining: int
    last_claim_at: datetime | None = None
