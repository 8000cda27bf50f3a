"""Recording content cipher for testing the content gate.

Counts encrypt/decrypt calls so tests can prove an unauthorized read never
reaches the cipher. The "encryption" is a reversible byte transform and
offers no confidentiality.

WARNING: This stub is NOT for production use.
"""

from __future__ import annotations

from guardian_ledger.application.ports.content_cipher import ContentCipherProtocol
from guardian_ledger.domain.errors import ContentIntegrityError

_PREFIX = b"sealed:"


class ContentCipherStub(ContentCipherProtocol):
    """Call-counting implementation of ContentCipherProtocol."""

    def __init__(self) -> None:
        """Initialize call counters."""
        self.encrypt_calls: list[int] = []
        self.decrypt_calls: list[int] = []

    def encrypt(self, report_id: int, plaintext: bytes) -> bytes:
        """Return a report-bound reversible encoding of plaintext."""
        self.encrypt_calls.append(report_id)
        return _PREFIX + str(report_id).encode() + b":" + plaintext[::-1]

    def decrypt(self, report_id: int, ciphertext: bytes) -> bytes:
        """Reverse encrypt().

        Raises:
            ContentIntegrityError: If ciphertext was not sealed for report_id.
        """
        self.decrypt_calls.append(report_id)
        header = _PREFIX + str(report_id).encode() + b":"
        if not ciphertext.startswith(header):
            raise ContentIntegrityError(report_id)
        return ciphertext[len(header) :][::-1]

    def clear(self) -> None:
        """Reset call counters (for testing)."""
        self.encrypt_calls.clear()
        self.decrypt_calls.clear()
