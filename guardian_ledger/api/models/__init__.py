"""API models for Guardian Ledger reads and errors."""

from guardian_ledger.api.models.ledger import (
    LedgerErrorResponse,
    LedgerStatsResponse,
    ReportInfoResponse,
    StakeVerificationResponse,
    UserStatusResponse,
    VerificationRequirementsResponse,
)

__all__: list[str] = [
    "LedgerErrorResponse",
    "LedgerStatsResponse",
    "ReportInfoResponse",
    "StakeVerificationResponse",
    "UserStatusResponse",
    "VerificationRequirementsResponse",
]
