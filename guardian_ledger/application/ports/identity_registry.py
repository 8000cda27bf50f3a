"""Identity registry ports consumed by other components.

The report ledger only needs to ask whether a caller is verified; the
stake gate only needs the verification entry point. Each depends on the
narrow protocol rather than on IdentityRegistryService.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class IdentityCheckerProtocol(Protocol):
    """Public identity predicates."""

    @abstractmethod
    async def is_registered(self, address: str) -> bool:
        """Return True if address has a registry record."""
        ...

    @abstractmethod
    async def is_verified(self, address: str) -> bool:
        """Return True if address is verified."""
        ...


class IdentityVerifierProtocol(Protocol):
    """Verification entry point for the admin and oracles."""

    @abstractmethod
    async def verify(self, caller: str, address: str) -> None:
        """Verify address, authorized as caller."""
        ...
