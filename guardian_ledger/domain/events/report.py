"""Report ledger event payloads.

This module defines the audit events emitted by the report ledger:
- ReportSubmittedEvent: A verified identity filed a report
- ContentAccessedEvent: An authorized caller read report plaintext
- ReportStatusChangedEvent: A verifier moved a report along the FSM
- RewardClaimedEvent: A reporter claimed the reporter reward
- VerifierAllowlistChangedEvent: The admin added or removed a verifier

Events are published only after the transaction that produced them
commits. No event ever carries report plaintext or ciphertext.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Final

from guardian_ledger.domain.models.report import ReportStatus

REPORT_SUBMITTED_EVENT_TYPE: Final[str] = "report.submitted"
CONTENT_ACCESSED_EVENT_TYPE: Final[str] = "report.content_accessed"
REPORT_STATUS_CHANGED_EVENT_TYPE: Final[str] = "report.status_changed"
REWARD_CLAIMED_EVENT_TYPE: Final[str] = "report.reward_claimed"
VERIFIER_ALLOWLIST_CHANGED_EVENT_TYPE: Final[str] = "report.verifier_allowlist_changed"


class ContentAccessRole(Enum):
    """Role under which a caller passed the content gate."""

    REPORTER = "reporter"
    VERIFIER = "verifier"


@dataclass(frozen=True, eq=True)
class ReportSubmittedEvent:
    """Payload for report submission.

    Attributes:
        report_id: Id assigned to the new report.
        reporter: Submitting address.
        content_hash: BLAKE3 hex digest of the ciphertext.
        submitted_at: Submission time (UTC).
    """

    report_id: int
    reporter: str
    content_hash: str
    submitted_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return REPORT_SUBMITTED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "report_id": self.report_id,
            "reporter": self.reporter,
            "content_hash": self.content_hash,
            "submitted_at": self.submitted_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class ContentAccessedEvent:
    """Payload for a successful content read.

    Records who read which report and in what role; never the content.

    Attributes:
        report_id: The report read.
        accessor: The caller that passed the gate.
        access_role: REPORTER or VERIFIER.
        accessed_at: Access time (UTC).
    """

    report_id: int
    accessor: str
    access_role: ContentAccessRole
    accessed_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return CONTENT_ACCESSED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "report_id": self.report_id,
            "accessor": self.accessor,
            "access_role": self.access_role.value,
            "accessed_at": self.accessed_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class ReportStatusChangedEvent:
    """Payload for a report status transition.

    Attributes:
        report_id: The report transitioned.
        actor: Verifier or admin that made the change.
        from_status: Status before the change.
        to_status: Status after the change.
        changed_at: Transition time (UTC).
    """

    report_id: int
    actor: str
    from_status: ReportStatus
    to_status: ReportStatus
    changed_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return REPORT_STATUS_CHANGED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "report_id": self.report_id,
            "actor": self.actor,
            "from_status": self.from_status.name,
            "to_status": self.to_status.name,
            "changed_at": self.changed_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class RewardClaimedEvent:
    """Payload for a reporter reward claim.

    Attributes:
        report_id: The report whose reward was claimed.
        reporter: The claiming reporter.
        amount: Reward in base units.
        claimed_at: Claim time (UTC).
    """

    report_id: int
    reporter: str
    amount: int
    claimed_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return REWARD_CLAIMED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "report_id": self.report_id,
            "reporter": self.reporter,
            "amount": str(self.amount),
            "claimed_at": self.claimed_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class VerifierAllowlistChangedEvent:
    """Payload for a verifier allowlist change.

    Attributes:
        verifier: The address added or removed.
        added: True when added, False when removed.
        changed_by: The admin.
        changed_at: Change time (UTC).
    """

    verifier: str
    added: bool
    changed_by: str
    changed_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return VERIFIER_ALLOWLIST_CHANGED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "verifier": self.verifier,
            "added": self.added,
            "changed_by": self.changed_by,
            "changed_at": self.changed_at.isoformat(),
        }
