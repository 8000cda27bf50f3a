"""Content cipher port.

Report plaintext is sealed under a key bound to the report id. The report
ledger runs its access check before it ever calls decrypt().
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class ContentCipherProtocol(Protocol):
    """Authenticated encryption of report content."""

    @abstractmethod
    def encrypt(self, report_id: int, plaintext: bytes) -> bytes:
        """Seal plaintext for report_id."""
        ...

    @abstractmethod
    def decrypt(self, report_id: int, ciphertext: bytes) -> bytes:
        """Open ciphertext sealed for report_id.

        Raises:
            ContentIntegrityError: If authentication fails.
        """
        ...
