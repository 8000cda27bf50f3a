"""Application ports - abstract interfaces for infrastructure adapters.

Available ports:
- AllowlistProtocol: minter, verifier and oracle allowlists
- AuditEventEmitterProtocol / LedgerEvent: committed audit events
- ContentCipherProtocol: report content encryption
- FaucetClaimRepositoryProtocol: faucet cooldown bookkeeping
- IdentityCheckerProtocol / IdentityVerifierProtocol: identity registry seams
- LedgerMetricsProtocol: transaction outcome metrics
- ReportRepositoryProtocol: report arena and indexes
- RewardMinterProtocol: token minting for rewards
- SnapshotCapable: stores that take part in ledger transactions
- StakeEvidenceRepositoryProtocol: consumed stake references
- TimeAuthorityProtocol: injected clock
- TokenStoreProtocol: balances, supply and receipt journal
- TransferSourceProtocol: transfer lookup for the stake gate
- UserRepositoryProtocol: identity arena
"""

from guardian_ledger.application.ports.allowlist import AllowlistProtocol
from guardian_ledger.application.ports.audit_event_emitter import (
    AuditEventEmitterProtocol,
    LedgerEvent,
)
from guardian_ledger.application.ports.content_cipher import ContentCipherProtocol
from guardian_ledger.application.ports.faucet_claim_repository import (
    FaucetClaimRepositoryProtocol,
)
from guardian_ledger.application.ports.identity_registry import (
    IdentityCheckerProtocol,
    IdentityVerifierProtocol,
)
from guardian_ledger.application.ports.ledger_metrics import LedgerMetricsProtocol
from guardian_ledger.application.ports.report_repository import (
    ReportRepositoryProtocol,
)
from guardian_ledger.application.ports.reward_minter import RewardMinterProtocol
from guardian_ledger.application.ports.snapshot import SnapshotCapable
from guardian_ledger.application.ports.stake_evidence_repository import (
    StakeEvidenceRepositoryProtocol,
)
from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol
from guardian_ledger.application.ports.token_store import TokenStoreProtocol
from guardian_ledger.application.ports.transfer_source import TransferSourceProtocol
from guardian_ledger.application.ports.user_repository import UserRepositoryProtocol

__all__: list[str] = [
    "AllowlistProtocol",
    "AuditEventEmitterProtocol",
    "ContentCipherProtocol",
    "FaucetClaimRepositoryProtocol",
    "IdentityCheckerProtocol",
    "IdentityVerifierProtocol",
    "LedgerEvent",
    "LedgerMetricsProtocol",
    "ReportRepositoryProtocol",
    "RewardMinterProtocol",
    "SnapshotCapable",
    "StakeEvidenceRepositoryProtocol",
    "TimeAuthorityProtocol",
    "TokenStoreProtocol",
    "TransferSourceProtocol",
    "UserRepositoryProtocol",
]
