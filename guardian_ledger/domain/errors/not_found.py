"""Not-found errors for unknown users and reports."""

from __future__ import annotations

from guardian_ledger.domain.exceptions import LedgerError


class NotFoundError(LedgerError):
    """Base error for lookups of records that do not exist."""

    pass


class UserNotRegisteredError(NotFoundError):
    """Raised when an operation targets an address with no user record.

    Attributes:
        address: The unregistered address.
    """

    def __init__(self, address: str) -> None:
        """Initialize the error.

        Args:
            address: The unregistered address.
        """
        self.address = address
        super().__init__(f"Address {address} is not registered")


class ReportNotFoundError(NotFoundError):
    """Raised when a report id has never been assigned.

    Attributes:
        report_id: The unknown report id.
    """

    def __init__(self, report_id: int) -> None:
        """Initialize the error.

        Args:
            report_id: The unknown report id.
        """
        self.report_id = report_id
        super().__init__(f"Report not found: {report_id}")
