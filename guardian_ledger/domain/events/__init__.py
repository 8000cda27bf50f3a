"""Domain events for Guardian Ledger.

Every state-changing ledger operation records one or more of these
payloads. They are buffered by the sequencer and published to the audit
event emitter only after the transaction commits.
"""

from guardian_ledger.domain.events.identity import (
    ORACLE_ALLOWLIST_CHANGED_EVENT_TYPE,
    USER_REGISTERED_EVENT_TYPE,
    USER_VERIFIED_EVENT_TYPE,
    OracleAllowlistChangedEvent,
    UserRegisteredEvent,
    UserVerifiedEvent,
)
from guardian_ledger.domain.events.report import (
    CONTENT_ACCESSED_EVENT_TYPE,
    REPORT_STATUS_CHANGED_EVENT_TYPE,
    REPORT_SUBMITTED_EVENT_TYPE,
    REWARD_CLAIMED_EVENT_TYPE,
    VERIFIER_ALLOWLIST_CHANGED_EVENT_TYPE,
    ContentAccessedEvent,
    ContentAccessRole,
    ReportStatusChangedEvent,
    ReportSubmittedEvent,
    RewardClaimedEvent,
    VerifierAllowlistChangedEvent,
)
from guardian_ledger.domain.events.stake import (
    STAKE_EVIDENCE_CONSUMED_EVENT_TYPE,
    StakeEvidenceConsumedEvent,
)
from guardian_ledger.domain.events.token import (
    MINT_REASON_DIRECT,
    MINT_REASON_FAUCET,
    MINT_REASON_INITIAL_SUPPLY,
    MINT_REASON_INVESTIGATOR_REWARD,
    MINT_REASON_REPORTER_REWARD,
    MINTER_ALLOWLIST_CHANGED_EVENT_TYPE,
    TOKENS_MINTED_EVENT_TYPE,
    TOKENS_TRANSFERRED_EVENT_TYPE,
    MinterAllowlistChangedEvent,
    TokensMintedEvent,
    TokensTransferredEvent,
)

__all__: list[str] = [
    "CONTENT_ACCESSED_EVENT_TYPE",
    "MINTER_ALLOWLIST_CHANGED_EVENT_TYPE",
    "MINT_REASON_DIRECT",
    "MINT_REASON_FAUCET",
    "MINT_REASON_INITIAL_SUPPLY",
    "MINT_REASON_INVESTIGATOR_REWARD",
    "MINT_REASON_REPORTER_REWARD",
    "ORACLE_ALLOWLIST_CHANGED_EVENT_TYPE",
    "REPORT_STATUS_CHANGED_EVENT_TYPE",
    "REPORT_SUBMITTED_EVENT_TYPE",
    "REWARD_CLAIMED_EVENT_TYPE",
    "STAKE_EVIDENCE_CONSUMED_EVENT_TYPE",
    "TOKENS_MINTED_EVENT_TYPE",
    "TOKENS_TRANSFERRED_EVENT_TYPE",
    "USER_REGISTERED_EVENT_TYPE",
    "USER_VERIFIED_EVENT_TYPE",
    "VERIFIER_ALLOWLIST_CHANGED_EVENT_TYPE",
    "ContentAccessRole",
    "ContentAccessedEvent",
    "MinterAllowlistChangedEvent",
    "OracleAllowlistChangedEvent",
    "ReportStatusChangedEvent",
    "ReportSubmittedEvent",
    "RewardClaimedEvent",
    "StakeEvidenceConsumedEvent",
    "TokensMintedEvent",
    "TokensTransferredEvent",
    "UserRegisteredEvent",
    "UserVerifiedEvent",
    "VerifierAllowlistChangedEvent",
]
