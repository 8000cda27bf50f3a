"""Authorization errors for callers lacking the required role.

Every gated operation names the role it requires; these errors are raised
before any state is read on behalf of an unauthorized caller.
"""

from __future__ import annotations

from guardian_ledger.domain.exceptions import LedgerError


class AuthorizationError(LedgerError):
    """Base error for callers lacking the required role."""

    pass


class UnauthorizedError(AuthorizationError):
    """Raised when a caller is not permitted to perform an action.

    Attributes:
        caller: The rejected caller.
        action: The attempted action.
    """

    def __init__(self, caller: str, action: str) -> None:
        """Initialize the error.

        Args:
            caller: The rejected caller.
            action: The attempted action.
        """
        self.caller = caller
        self.action = action
        super().__init__(f"Caller {caller} is not authorized to {action}")


class NotReporterError(AuthorizationError):
    """Raised when someone other than the reporter claims a reward.

    Attributes:
        caller: The rejected caller.
        report_id: The report being claimed.
    """

    def __init__(self, caller: str, report_id: int) -> None:
        """Initialize the error.

        Args:
            caller: The rejected caller.
            report_id: The report being claimed.
        """
        self.caller = caller
        self.report_id = report_id
        super().__init__(f"Caller {caller} is not the reporter of report {report_id}")


class AdminOnlyError(AuthorizationError):
    """Raised when a non-admin calls an admin-only operation.

    Attributes:
        caller: The rejected caller.
        action: The attempted action.
    """

    def __init__(self, caller: str, action: str) -> None:
        """Initialize the error.

        Args:
            caller: The rejected caller.
            action: The attempted action.
        """
        self.caller = caller
        self.action = action
        super().__init__(f"Only admin may {action} (caller={caller})")


class VerificationRequiredError(AuthorizationError):
    """Raised when an unverified identity submits a report.

    Attributes:
        caller: The unverified caller.
    """

    def __init__(self, caller: str) -> None:
        """Initialize the error.

        Args:
            caller: The unverified caller.
        """
        self.caller = caller
        super().__init__(f"Caller {caller} must be verified to submit reports")
