"""Application DTOs."""

from guardian_ledger.application.dtos.ledger import (
    FaucetStatus,
    LedgerStats,
    StakeVerificationResult,
    UserStatus,
    VerificationRequirements,
)

__all__: list[str] = [
    "FaucetStatus",
    "LedgerStats",
    "StakeVerificationResult",
    "UserStatus",
    "VerificationRequirements",
]
