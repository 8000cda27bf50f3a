"""Identity registry user model.

Identity State Machine:
    UNREGISTERED -> REGISTERED (register, caller-bound)
    REGISTERED -> VERIFIED (verify, admin or stake oracle)

VERIFIED is terminal and there is no edge back to UNREGISTERED: user
records are never deleted.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from guardian_ledger.domain.primitives import DeletePreventionMixin


class IdentityState(Enum):
    """Position of an address in the identity state machine."""

    UNREGISTERED = "UNREGISTERED"
    REGISTERED = "REGISTERED"
    VERIFIED = "VERIFIED"


@dataclass(frozen=True, eq=True)
class User(DeletePreventionMixin):
    """A registered identity.

    The identifier is confidentiality-sensitive and is only ever returned
    to the owning address. Everything else is public.

    Attributes:
        address: Identity key (immutable).
        identifier: Opaque identifier chosen by the owner.
        longevity: Non-negative longevity score.
        created_at: Registration timestamp (UTC).
        verified: Whether the user has been verified.
        verified_at: Verification timestamp (UTC), None until verified.
    """

    address: str
    identifier: str = field(repr=False)
    longevity: int
    created_at: datetime
    verified: bool = field(default=False)
    verified_at: datetime | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate user fields."""
        if self.longevity < 0:
            raise ValueError("longevity must be non-negative")
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware (UTC)")
        if self.verified and self.verified_at is None:
            raise ValueError("verified users must carry verified_at")

    @property
    def registered(self) -> bool:
        """A stored User is always registered."""
        return True

    @property
    def state(self) -> IdentityState:
        """Current position in the identity state machine."""
        return IdentityState.VERIFIED if self.verified else IdentityState.REGISTERED

    def with_verified(self, verified_at: datetime) -> User:
        """Return a verified copy of this user.

        Callers must check ``verified`` first; verification is one-way.

        Args:
            verified_at: Verification timestamp (UTC).

        Returns:
            New User with verified=True.
        """
        return replace(self, verified=True, verified_at=verified_at)
