"""In-memory user arena.

Users are keyed by address. The arena takes part in ledger transactions
through snapshot()/restore().
"""

from __future__ import annotations

from typing import cast

from guardian_ledger.application.ports.user_repository import UserRepositoryProtocol
from guardian_ledger.domain.models.user import User


class InMemoryUserRepository(UserRepositoryProtocol):
    """Dict-backed implementation of UserRepositoryProtocol.

    User records are frozen, so a shallow copy of the dict is a complete
    snapshot.
    """

    def __init__(self) -> None:
        """Initialize an empty arena."""
        self._users: dict[str, User] = {}

    async def get(self, address: str) -> User | None:
        """Return the user stored under address, or None."""
        return self._users.get(address)

    async def save(self, user: User) -> None:
        """Insert or replace the record for user.address."""
        self._users[user.address] = user

    async def count(self) -> int:
        """Return the number of registered users."""
        return len(self._users)

    def snapshot(self) -> dict[str, User]:
        """Capture the arena."""
        return dict(self._users)

    def restore(self, snapshot: object) -> None:
        """Restore a snapshot taken by snapshot()."""
        self._users = dict(cast(dict[str, User], snapshot))

    def clear(self) -> None:
        """Clear all records (for testing)."""
        self._users.clear()
