"""Validation errors for malformed or empty ledger input.

This module provides the ValidationError family. A validation error means
the call itself was malformed: the arguments could never succeed no matter
what state the ledger is in.

Ledger Invariants:
- A rejected call leaves no partial state behind
- Validation happens before any store is touched
"""

from __future__ import annotations

from guardian_ledger.domain.exceptions import LedgerError


class ValidationError(LedgerError):
    """Base error for malformed or empty input.

    All subclasses describe an argument that failed validation before
    the operation touched ledger state.
    """

    pass


class InvalidAddressError(ValidationError):
    """Raised when an address is not a 0x-prefixed 20-byte hex string.

    Attributes:
        value: The rejected address value.
    """

    def __init__(self, value: object) -> None:
        """Initialize the error.

        Args:
            value: The rejected address value.
        """
        self.value = value
        super().__init__(f"Invalid address: {value!r}")


class EmptyContentError(ValidationError):
    """Raised when a required text field is empty or whitespace.

    Attributes:
        field_name: Name of the empty field.
    """

    def __init__(self, field_name: str) -> None:
        """Initialize the error.

        Args:
            field_name: Name of the empty field.
        """
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' must not be empty")


class InvalidAmountError(ValidationError):
    """Raised when a token amount or score is out of range.

    Attributes:
        amount: The rejected amount.
        field_name: Name of the offending field.
    """

    def __init__(self, amount: object, field_name: str = "amount") -> None:
        """Initialize the error.

        Args:
            amount: The rejected amount.
            field_name: Name of the offending field.
        """
        self.amount = amount
        self.field_name = field_name
        super().__init__(f"Invalid {field_name}: {amount!r}")


class InvalidLimitError(ValidationError):
    """Raised when a listing limit is outside the allowed window.

    Attributes:
        limit: The rejected limit.
        max_limit: The largest permitted limit.
    """

    def __init__(self, limit: object, max_limit: int) -> None:
        """Initialize the error.

        Args:
            limit: The rejected limit.
            max_limit: The largest permitted limit.
        """
        self.limit = limit
        self.max_limit = max_limit
        super().__init__(f"Limit must be between 1 and {max_limit}, got {limit!r}")


class InvalidStatusCodeError(ValidationError):
    """Raised when a report status code is not one of 0-4.

    Attributes:
        code: The rejected status code.
    """

    def __init__(self, code: object) -> None:
        """Initialize the error.

        Args:
            code: The rejected status code.
        """
        self.code = code
        super().__init__(f"Unknown report status code: {code!r}")


class ContentIntegrityError(ValidationError):
    """Raised when stored ciphertext no longer matches its content hash.

    The content gate refuses to decrypt tampered ciphertext.

    Attributes:
        report_id: The report whose ciphertext failed the check.
    """

    def __init__(self, report_id: int) -> None:
        """Initialize the error.

        Args:
            report_id: The report whose ciphertext failed the check.
        """
        self.report_id = report_id
        super().__init__(f"Report {report_id} ciphertext does not match its content hash")
