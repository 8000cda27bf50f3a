"""User repository port for the identity registry."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from guardian_ledger.domain.models.user import User


class UserRepositoryProtocol(Protocol):
    """Arena of User records keyed by address.

    Records are inserted once and replaced only by their own verified
    copy. There is no delete.
    """

    @abstractmethod
    async def get(self, address: str) -> User | None:
        """Return the user stored under address, or None."""
        ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or replace the record for user.address."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of registered users."""
        ...
