"""Identity registry event payloads.

The registered identifier is confidential and never appears in an event.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

USER_REGISTERED_EVENT_TYPE: Final[str] = "identity.user_registered"
USER_VERIFIED_EVENT_TYPE: Final[str] = "identity.user_verified"
ORACLE_ALLOWLIST_CHANGED_EVENT_TYPE: Final[str] = "identity.oracle_allowlist_changed"


@dataclass(frozen=True, eq=True)
class UserRegisteredEvent:
    """Payload for self-registration.

    Attributes:
        address: The registering address.
        longevity: Declared longevity.
        registered_at: Registration time (UTC).
    """

    address: str
    longevity: int
    registered_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return USER_REGISTERED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "address": self.address,
            "longevity": self.longevity,
            "registered_at": self.registered_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class UserVerifiedEvent:
    """Payload for a verification grant.

    Attributes:
        address: The verified address.
        verified_by: Admin or oracle that granted verification.
        verified_at: Verification time (UTC).
    """

    address: str
    verified_by: str
    verified_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return USER_VERIFIED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "address": self.address,
            "verified_by": self.verified_by,
            "verified_at": self.verified_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class OracleAllowlistChangedEvent:
    """Payload for an oracle allowlist change."""

    oracle: str
    added: bool
    changed_by: str
    changed_at: datetime

    @property
    def event_type(self) -> str:
        """Get the event type for this payload."""
        return ORACLE_ALLOWLIST_CHANGED_EVENT_TYPE

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for serialization."""
        return {
            "oracle": self.oracle,
            "added": self.added,
            "changed_by": self.changed_by,
            "changed_at": self.changed_at.isoformat(),
        }
