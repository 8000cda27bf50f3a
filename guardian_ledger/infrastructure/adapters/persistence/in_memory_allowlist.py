"""In-memory allowlist backing the minter, verifier and oracle lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import cast

from guardian_ledger.application.ports.allowlist import AllowlistProtocol


class InMemoryAllowlist(AllowlistProtocol):
    """Set-backed implementation of AllowlistProtocol.

    Attributes:
        name: Label used in logs and reprs (e.g. "minters").
    """

    def __init__(self, name: str, members: Iterable[str] = ()) -> None:
        """Initialize the allowlist.

        Args:
            name: Label for the list.
            members: Initial members (already normalized).
        """
        self.name = name
        self._members: set[str] = set(members)

    def __repr__(self) -> str:
        return f"InMemoryAllowlist(name={self.name!r}, size={len(self._members)})"

    async def contains(self, address: str) -> bool:
        """Return True if address is on the allowlist."""
        return address in self._members

    async def add(self, address: str) -> bool:
        """Add address; True if it was not already present."""
        if address in self._members:
            return False
        self._members.add(address)
        return True

    async def remove(self, address: str) -> bool:
        """Remove address; True if it was present."""
        if address not in self._members:
            return False
        self._members.discard(address)
        return True

    async def members(self) -> frozenset[str]:
        """Return all addresses on the allowlist."""
        return frozenset(self._members)

    def snapshot(self) -> frozenset[str]:
        """Capture the member set."""
        return frozenset(self._members)

    def restore(self, snapshot: object) -> None:
        """Restore a snapshot taken by snapshot()."""
        self._members = set(cast(frozenset[str], snapshot))
