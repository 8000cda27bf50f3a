"""Stake verification errors.

This module provides the errors the stake gate raises while turning a token
transfer into an identity verification.

Ledger Invariants:
- One transfer grants at most one verification (replay safety)
- Wrong sender, recipient or amount is always rejected
- "Not yet confirmed" is never treated as a permanent failure
"""

from __future__ import annotations

from guardian_ledger.domain.errors.state import StateError
from guardian_ledger.domain.errors.validation import ValidationError
from guardian_ledger.domain.exceptions import LedgerError


class StakeRejectedError(ValidationError):
    """Raised when a transfer fails one of the stake checks.

    This is permanent: re-submitting the same reference will fail the
    same way.

    Attributes:
        tx_ref: The transfer reference.
        reason: Machine-readable reason (wrong_sender, wrong_recipient,
            insufficient_amount, transfer_failed).
        expected: The expected value, when applicable.
        actual: The observed value, when applicable.
    """

    def __init__(
        self,
        tx_ref: str,
        reason: str,
        expected: object | None = None,
        actual: object | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            tx_ref: The transfer reference.
            reason: Machine-readable rejection reason.
            expected: The expected value, when applicable.
            actual: The observed value, when applicable.
        """
        self.tx_ref = tx_ref
        self.reason = reason
        self.expected = expected
        self.actual = actual
        detail = f" (expected={expected!r}, actual={actual!r})" if expected is not None else ""
        super().__init__(f"Stake transfer {tx_ref} rejected: {reason}{detail}")


class StakeReplayError(StateError):
    """Raised when a consumed transfer is presented for another registrant.

    Attributes:
        tx_ref: The transfer reference.
        consumed_by: The registrant the transfer already verified.
        presented_by: The registrant presenting it again.
    """

    def __init__(self, tx_ref: str, consumed_by: str, presented_by: str) -> None:
        """Initialize the error.

        Args:
            tx_ref: The transfer reference.
            consumed_by: The registrant the transfer already verified.
            presented_by: The registrant presenting it again.
        """
        self.tx_ref = tx_ref
        self.consumed_by = consumed_by
        self.presented_by = presented_by
        super().__init__(
            f"Stake transfer {tx_ref} already consumed by {consumed_by}; "
            f"cannot verify {presented_by}"
        )


class StakeNotYetConfirmedError(StateError):
    """Raised when a transfer is unknown or unconfirmed after bounded polling.

    The caller should retry later; nothing was consumed.

    Attributes:
        tx_ref: The transfer reference.
        attempts: How many polls were made.
        retryable: Always True.
    """

    retryable: bool = True

    def __init__(self, tx_ref: str, attempts: int) -> None:
        """Initialize the error.

        Args:
            tx_ref: The transfer reference.
            attempts: How many polls were made.
        """
        self.tx_ref = tx_ref
        self.attempts = attempts
        super().__init__(
            f"Stake transfer {tx_ref} not yet confirmed after {attempts} attempts"
        )


class TransferSourceUnavailableError(LedgerError):
    """Raised by a transfer source that cannot answer right now.

    The stake gate treats this as "not yet" and keeps polling.

    Attributes:
        tx_ref: The transfer reference being fetched.
    """

    def __init__(self, tx_ref: str, message: str = "Transfer source unavailable") -> None:
        """Initialize the error.

        Args:
            tx_ref: The transfer reference being fetched.
            message: Detailed error message.
        """
        self.tx_ref = tx_ref
        super().__init__(f"{message}: {tx_ref}")
