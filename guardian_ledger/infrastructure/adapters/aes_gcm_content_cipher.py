"""AES-GCM report content cipher.

Each report is sealed under its own 256-bit key, derived with
HKDF-SHA256 from a master key and the report id. The report id is also
bound as associated data, so ciphertext moved between reports fails
authentication instead of decrypting under the wrong id.

Ciphertext layout: 12-byte random nonce || AES-GCM ciphertext and tag.
"""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from structlog import get_logger

from guardian_ledger.application.ports.content_cipher import ContentCipherProtocol
from guardian_ledger.domain.errors import ContentIntegrityError

logger = get_logger(__name__)

MASTER_KEY_BYTES: int = 32
NONCE_BYTES: int = 12
KEY_DERIVATION_SALT: bytes = b"guardian-ledger/content"


class AesGcmContentCipher(ContentCipherProtocol):
    """ContentCipherProtocol implementation using AES-256-GCM.

    Example:
        >>> cipher = AesGcmContentCipher(master_key=os.urandom(32))
        >>> sealed = cipher.encrypt(1, b"hello")
        >>> cipher.decrypt(1, sealed)
        b'hello'
    """

    def __init__(self, master_key: bytes) -> None:
        """Initialize the cipher.

        Args:
            master_key: 32-byte master key.

        Raises:
            ValueError: If master_key is not 32 bytes.
        """
        if len(master_key) != MASTER_KEY_BYTES:
            raise ValueError(f"master_key must be {MASTER_KEY_BYTES} bytes")
        self._master_key = master_key

    @classmethod
    def with_random_key(cls) -> AesGcmContentCipher:
        """Create a cipher with a fresh random master key.

        Content sealed by this cipher is unreadable once the process exits.
        """
        logger.warning("content_cipher_using_ephemeral_key")
        return cls(os.urandom(MASTER_KEY_BYTES))

    def _report_key(self, report_id: int) -> AESGCM:
        key = HKDF(
            algorithm=hashes.SHA256(),
            length=MASTER_KEY_BYTES,
            salt=KEY_DERIVATION_SALT,
            info=b"guardian-ledger/report/%d" % report_id,
        ).derive(self._master_key)
        return AESGCM(key)

    @staticmethod
    def _associated_data(report_id: int) -> bytes:
        return report_id.to_bytes(8, "big")

    def encrypt(self, report_id: int, plaintext: bytes) -> bytes:
        """Seal plaintext for report_id."""
        nonce = os.urandom(NONCE_BYTES)
        sealed = self._report_key(report_id).encrypt(
            nonce, plaintext, self._associated_data(report_id)
        )
        return nonce + sealed

    def decrypt(self, report_id: int, ciphertext: bytes) -> bytes:
        """Open ciphertext sealed for report_id.

        Raises:
            ContentIntegrityError: If the ciphertext is truncated or fails
                authentication.
        """
        if len(ciphertext) <= NONCE_BYTES:
            raise ContentIntegrityError(report_id)
        nonce, sealed = ciphertext[:NONCE_BYTES], ciphertext[NONCE_BYTES:]
        try:
            return self._report_key(report_id).decrypt(
                nonce, sealed, self._associated_data(report_id)
            )
        except InvalidTag:
            logger.warning("content_authentication_failed", report_id=report_id)
            raise ContentIntegrityError(report_id) from None
