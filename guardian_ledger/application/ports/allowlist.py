"""Allowlist port.

One implementation backs the minter, verifier and oracle allowlists.
Only the owning component's admin mutates an allowlist.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class AllowlistProtocol(Protocol):
    """A set of addresses with an elevated right."""

    @abstractmethod
    async def contains(self, address: str) -> bool:
        """Return True if address is on the allowlist."""
        ...

    @abstractmethod
    async def add(self, address: str) -> bool:
        """Add address.

        Returns:
            True if the allowlist changed.
        """
        ...

    @abstractmethod
    async def remove(self, address: str) -> bool:
        """Remove address.

        Returns:
            True if the allowlist changed.
        """
        ...

    @abstractmethod
    async def members(self) -> frozenset[str]:
        """Return all addresses on the allowlist."""
        ...
