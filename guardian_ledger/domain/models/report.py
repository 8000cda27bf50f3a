"""Report domain model and status state machine.

This module defines the Report record owned by the report ledger, the
status enum with its stable integer codes, and the transition matrix every
status change is checked against.

Status State Machine:
    PENDING -> INVESTIGATING, VERIFIED, REJECTED
    INVESTIGATING -> VERIFIED, REJECTED
    VERIFIED -> CLOSED
    REJECTED -> CLOSED
    CLOSED is terminal (any change fails ClosedImmutableError)

Ledger Invariants:
- Report ids are 1-indexed, assigned sequentially and never reused
- verified_by / verification_timestamp are set exactly when entering VERIFIED
- reward_claimed flips false -> true at most once, only while VERIFIED
- Reports are never deleted
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import IntEnum

import blake3

from guardian_ledger.domain.primitives import DeletePreventionMixin


class ReportStatus(IntEnum):
    """Report lifecycle status with its stable external code.

    Codes:
        0 PENDING: Submitted, awaiting triage
        1 INVESTIGATING: Under investigation
        2 VERIFIED: Substantiated; reporter reward claimable
        3 REJECTED: Not substantiated
        4 CLOSED: Case closed (terminal)
    """

    PENDING = 0
    INVESTIGATING = 1
    VERIFIED = 2
    REJECTED = 3
    CLOSED = 4

    @classmethod
    def from_code(cls, code: object) -> ReportStatus:
        """Resolve a status from its integer code or enum member.

        Args:
            code: An int 0-4 or a ReportStatus.

        Returns:
            The matching ReportStatus.

        Raises:
            InvalidStatusCodeError: If code is not a known status.
        """
        from guardian_ledger.domain.errors.validation import InvalidStatusCodeError

        if isinstance(code, ReportStatus):
            return code
        # bool is an int subclass; True must not silently mean INVESTIGATING
        if not isinstance(code, int) or isinstance(code, bool):
            raise InvalidStatusCodeError(code)
        try:
            return cls(code)
        except ValueError:
            raise InvalidStatusCodeError(code) from None

    @property
    def display_name(self) -> str:
        """Human-readable name (e.g. "Investigating")."""
        return self.name.capitalize()

    def is_terminal(self) -> bool:
        """Return True if no transition leaves this status."""
        return self is ReportStatus.CLOSED

    def valid_transitions(self) -> frozenset[ReportStatus]:
        """Statuses reachable from this one in a single step."""
        return STATUS_TRANSITION_MATRIX.get(self, frozenset())


# Maps each status to the statuses it may move to
STATUS_TRANSITION_MATRIX: dict[ReportStatus, frozenset[ReportStatus]] = {
    ReportStatus.PENDING: frozenset(
        {
            ReportStatus.INVESTIGATING,
            ReportStatus.VERIFIED,
            ReportStatus.REJECTED,
        }
    ),
    ReportStatus.INVESTIGATING: frozenset(
        {
            ReportStatus.VERIFIED,
            ReportStatus.REJECTED,
        }
    ),
    ReportStatus.VERIFIED: frozenset({ReportStatus.CLOSED}),
    ReportStatus.REJECTED: frozenset({ReportStatus.CLOSED}),
    ReportStatus.CLOSED: frozenset(),
}


def compute_content_hash(ciphertext: bytes) -> str:
    """Compute the integrity digest of a report's ciphertext.

    The digest is public; it lets anyone check ciphertext integrity
    without being able to decrypt.

    Args:
        ciphertext: Encrypted report content.

    Returns:
        Hex-encoded 32-byte BLAKE3 digest.
    """
    return blake3.blake3(ciphertext).hexdigest()


@dataclass(frozen=True, eq=True)
class ReportInfo:
    """Public, non-confidential view of a report.

    Attributes:
        id: Report id.
        reporter: Address of the reporter.
        timestamp: Submission time (UTC).
        status: Current status.
        verified_by: Verifier that moved the report to VERIFIED, if any.
        verification_timestamp: When it entered VERIFIED, if it did.
        content_hash: BLAKE3 hex digest of the ciphertext.
        reward_claimed: Whether the reporter reward has been claimed.
    """

    id: int
    reporter: str
    timestamp: datetime
    status: ReportStatus
    verified_by: str | None
    verification_timestamp: datetime | None
    content_hash: str
    reward_claimed: bool


@dataclass(frozen=True, eq=True)
class Report(DeletePreventionMixin):
    """A confidential report held by the report ledger.

    Since Report is frozen, every change returns a new instance; the
    repository stores the latest one under the same id.

    Attributes:
        id: Sequential 1-indexed id.
        reporter: Address of the submitting identity.
        ciphertext: Encrypted content, owned by the report.
        content_hash: BLAKE3 hex digest of ciphertext.
        timestamp: Submission time (UTC).
        status: Current lifecycle status.
        verified_by: Set when entering VERIFIED.
        verification_timestamp: Set when entering VERIFIED.
        reward_claimed: Reporter reward flag.
    """

    id: int
    reporter: str
    ciphertext: bytes = field(repr=False)
    content_hash: str
    timestamp: datetime
    status: ReportStatus = field(default=ReportStatus.PENDING)
    verified_by: str | None = field(default=None)
    verification_timestamp: datetime | None = field(default=None)
    reward_claimed: bool = field(default=False)

    def __post_init__(self) -> None:
        """Validate report fields."""
        if self.id < 1:
            raise ValueError("Report ids are 1-indexed")
        if self.timestamp.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware (UTC)")
        if self.reward_claimed and self.verified_by is None:
            raise ValueError("reward_claimed requires a verified report")

    def content_intact(self) -> bool:
        """Return True if ciphertext still matches content_hash."""
        return compute_content_hash(self.ciphertext) == self.content_hash

    def with_status(
        self,
        new_status: ReportStatus,
        actor: str,
        at: datetime,
    ) -> Report:
        """Return a copy moved to new_status, enforcing the matrix.

        Entering VERIFIED records the actor and time of verification.

        Args:
            new_status: Target status.
            actor: Address performing the transition.
            at: Transition time (UTC).

        Returns:
            New Report with the updated status.

        Raises:
            ClosedImmutableError: If the report is CLOSED.
            IllegalTransitionError: If new_status is not reachable.
        """
        from guardian_ledger.domain.errors.state import (
            ClosedImmutableError,
            IllegalTransitionError,
        )

        if self.status.is_terminal():
            raise ClosedImmutableError(self.id)

        allowed = self.status.valid_transitions()
        if new_status not in allowed:
            raise IllegalTransitionError(
                report_id=self.id,
                from_status=self.status,
                to_status=new_status,
                allowed=list(allowed),
            )

        if new_status is ReportStatus.VERIFIED:
            return replace(
                self,
                status=new_status,
                verified_by=actor,
                verification_timestamp=at,
            )
        return replace(self, status=new_status)

    def with_reward_claimed(self) -> Report:
        """Return a copy with the reporter reward marked claimed.

        Raises:
            NotVerifiedError: If the report is not VERIFIED.
            DoubleClaimError: If the reward was already claimed.
        """
        from guardian_ledger.domain.errors.state import (
            DoubleClaimError,
            NotVerifiedError,
        )

        if self.status is not ReportStatus.VERIFIED:
            raise NotVerifiedError(self.id, self.status)
        if self.reward_claimed:
            raise DoubleClaimError(self.id)
        return replace(self, reward_claimed=True)

    def info(self) -> ReportInfo:
        """Return the public view of this report (no ciphertext)."""
        return ReportInfo(
            id=self.id,
            reporter=self.reporter,
            timestamp=self.timestamp,
            status=self.status,
            verified_by=self.verified_by,
            verification_timestamp=self.verification_timestamp,
            content_hash=self.content_hash,
            reward_claimed=self.reward_claimed,
        )
