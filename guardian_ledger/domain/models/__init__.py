"""Domain models for Guardian Ledger."""

from guardian_ledger.domain.models.address import (
    derive_address,
    is_valid_address,
    normalize_address,
)
from guardian_ledger.domain.models.report import (
    STATUS_TRANSITION_MATRIX,
    Report,
    ReportInfo,
    ReportStatus,
    compute_content_hash,
)
from guardian_ledger.domain.models.stake import (
    StakeEvidence,
    StakeTransfer,
    TransferConfirmation,
)
from guardian_ledger.domain.models.token import (
    ONE_TOKEN,
    TOKEN_DECIMALS,
    TokenMetadata,
    TransferKind,
    TransferReceipt,
    tokens,
)
from guardian_ledger.domain.models.user import IdentityState, User

__all__: list[str] = [
    "ONE_TOKEN",
    "STATUS_TRANSITION_MATRIX",
    "TOKEN_DECIMALS",
    "IdentityState",
    "Report",
    "ReportInfo",
    "ReportStatus",
    "StakeEvidence",
    "StakeTransfer",
    "TokenMetadata",
    "TransferConfirmation",
    "TransferKind",
    "TransferReceipt",
    "User",
    "compute_content_hash",
    "derive_address",
    "is_valid_address",
    "normalize_address",
    "tokens",
]
