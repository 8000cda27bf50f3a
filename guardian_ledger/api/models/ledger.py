"""Guardian Ledger API response models.

Pydantic models for exposing ledger reads to HTTP or CLI front ends.
Token amounts are base-unit integers and are serialized as decimal strings
so no JSON consumer rounds them through a float. Report content never
appears here; only get_content returns plaintext, and only to an
authorized caller.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

# Custom datetime serializer for ISO 8601 with Z suffix (Pydantic v2)
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]

# Base-unit amounts as decimal strings
TokenAmount = Annotated[int, PlainSerializer(lambda v: str(v), return_type=str)]


class ReportInfoResponse(BaseModel):
    """Public view of a report.

    Attributes:
        id: Report id.
        reporter: Reporter address.
        timestamp: Submission time.
        status: Status name (PENDING, INVESTIGATING, VERIFIED, REJECTED, CLOSED).
        status_code: Numeric status code (0-4).
        verified_by: Verifier that verified the report, if any.
        verification_timestamp: When the report was verified, if it was.
        content_hash: BLAKE3 hex digest of the stored ciphertext.
        reward_claimed: Whether the reporter reward was claimed.
    """

    id: int = Field(..., ge=1, description="Report id")
    reporter: str = Field(..., description="Reporter address")
    timestamp: DateTimeWithZ = Field(..., description="Submission time (UTC)")
    status: str = Field(..., description="Status name")
    status_code: int = Field(..., ge=0, le=4, description="Numeric status code")
    verified_by: str | None = Field(default=None, description="Verifier address")
    verification_timestamp: DateTimeWithZ | None = Field(
        default=None, description="Verification time (UTC)"
    )
    content_hash: str = Field(..., description="BLAKE3 hex digest of the ciphertext")
    reward_claimed: bool = Field(..., description="Whether the reward was claimed")


class UserStatusResponse(BaseModel):
    """Registry status of an address."""

    address: str = Field(..., description="Queried address")
    is_registered: bool = Field(..., description="Has a registry record")
    is_verified: bool = Field(..., description="Is verified")
    created_at: DateTimeWithZ | None = Field(default=None, description="Registration time")
    verified_at: DateTimeWithZ | None = Field(default=None, description="Verification time")
    longevity: int = Field(default=0, ge=0, description="Declared longevity")


class StakeVerificationResponse(BaseModel):
    """Outcome of a stake verification."""

    registrant: str = Field(..., description="Verified identity")
    tx_ref: str = Field(..., description="Consumed transfer reference")
    amount: TokenAmount = Field(..., description="Staked amount in base units")
    verified_at: DateTimeWithZ = Field(..., description="When the stake was consumed")
    already_applied: bool = Field(
        default=False, description="True when this call was a no-op retry"
    )


class VerificationRequirementsResponse(BaseModel):
    """What a registrant must stake to be verified."""

    stake_amount: TokenAmount = Field(..., description="Stake in base units")
    treasury_address: str = Field(..., description="Address the stake is paid to")
    token_address: str = Field(..., description="Token the stake is paid in")
    required_confirmations: int = Field(..., ge=1, description="Confirmations required")


class LedgerStatsResponse(BaseModel):
    """Aggregate ledger counters."""

    total_reports: int = Field(..., ge=0)
    total_users: int = Field(..., ge=0)
    reports_by_status: dict[str, int] = Field(
        default_factory=dict, description="Count per status name"
    )
    total_supply: TokenAmount = Field(default=0, description="Supply in base units")
    block_height: int = Field(default=0, ge=0)


class LedgerErrorResponse(BaseModel):
    """RFC 7807 problem details for a rejected ledger operation.

    Attributes:
        type: Error type URI.
        title: Human-readable error title.
        status: HTTP status code equivalent.
        detail: Error message.
        instance: Operation or path that caused the error.
    """

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Human-readable error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error message")
    instance: str = Field(..., description="Operation that caused the error")
