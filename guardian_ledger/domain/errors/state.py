"""State errors for operations the current ledger state forbids.

A state error means the arguments were well formed but the record they
address is in the wrong state: a user registered twice, a report moved
along an edge the status machine does not have, a reward claimed twice.

Ledger Invariants:
- Status moves only along the transition matrix
- Closed reports are immutable
- A reward flag flips at most once
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from guardian_ledger.domain.exceptions import LedgerError

if TYPE_CHECKING:
    from guardian_ledger.domain.models.report import ReportStatus


class StateError(LedgerError):
    """Base error for operations rejected by the current state."""

    pass


class AlreadyRegisteredError(StateError):
    """Raised when an address registers a second time.

    Attributes:
        address: The already-registered address.
    """

    def __init__(self, address: str) -> None:
        """Initialize the error.

        Args:
            address: The already-registered address.
        """
        self.address = address
        super().__init__(f"Address {address} is already registered")


class AlreadyVerifiedError(StateError):
    """Raised when verify() targets an already-verified user.

    Verification is terminal; a second grant is rejected rather than
    silently accepted so that every verification maps to one grant.

    Attributes:
        address: The already-verified address.
    """

    def __init__(self, address: str) -> None:
        """Initialize the error.

        Args:
            address: The already-verified address.
        """
        self.address = address
        super().__init__(f"Address {address} is already verified")


class NotVerifiedError(StateError):
    """Raised when a reward is claimed on a report that is not Verified.

    Attributes:
        report_id: The report being claimed.
        status: The report's current status.
    """

    def __init__(self, report_id: int, status: ReportStatus) -> None:
        """Initialize the error.

        Args:
            report_id: The report being claimed.
            status: The report's current status.
        """
        self.report_id = report_id
        self.status = status
        super().__init__(
            f"Report {report_id} is not verified (status={status.name})"
        )


class DoubleClaimError(StateError):
    """Raised when a report's reward has already been claimed.

    Attributes:
        report_id: The report whose reward was already claimed.
    """

    def __init__(self, report_id: int) -> None:
        """Initialize the error.

        Args:
            report_id: The report whose reward was already claimed.
        """
        self.report_id = report_id
        super().__init__(f"Reward for report {report_id} already claimed")


class IllegalTransitionError(StateError):
    """Raised when a status change is not an edge of the transition matrix.

    Attributes:
        report_id: The report being transitioned.
        from_status: The current status.
        to_status: The requested status.
        allowed: The statuses reachable from from_status.
    """

    def __init__(
        self,
        report_id: int,
        from_status: ReportStatus,
        to_status: ReportStatus,
        allowed: list[ReportStatus],
    ) -> None:
        """Initialize the error.

        Args:
            report_id: The report being transitioned.
            from_status: The current status.
            to_status: The requested status.
            allowed: The statuses reachable from from_status.
        """
        self.report_id = report_id
        self.from_status = from_status
        self.to_status = to_status
        self.allowed = allowed
        allowed_names = ", ".join(sorted(s.name for s in allowed)) or "none"
        super().__init__(
            f"Report {report_id}: illegal transition "
            f"{from_status.name} -> {to_status.name} (allowed: {allowed_names})"
        )


class ClosedImmutableError(StateError):
    """Raised on any status change of a Closed report.

    Attributes:
        report_id: The closed report.
    """

    def __init__(self, report_id: int) -> None:
        """Initialize the error.

        Args:
            report_id: The closed report.
        """
        self.report_id = report_id
        super().__init__(f"Report {report_id} is closed and cannot change")


class InsufficientBalanceError(StateError):
    """Raised when a transfer exceeds the sender's balance.

    Attributes:
        address: The sender.
        balance: The sender's balance.
        requested: The amount requested.
    """

    def __init__(self, address: str, balance: int, requested: int) -> None:
        """Initialize the error.

        Args:
            address: The sender.
            balance: The sender's balance.
            requested: The amount requested.
        """
        self.address = address
        self.balance = balance
        self.requested = requested
        super().__init__(
            f"Insufficient balance for {address}: has {balance}, needs {requested}"
        )


class FaucetCooldownError(StateError):
    """Raised when an address draws from the faucet inside its cooldown.

    Attributes:
        address: The claiming address.
        retry_after_seconds: Seconds until the next claim is allowed.
    """

    def __init__(self, address: str, retry_after_seconds: int) -> None:
        """Initialize the error.

        Args:
            address: The claiming address.
            retry_after_seconds: Seconds until the next claim is allowed.
        """
        self.address = address
        self.retry_after_seconds = retry_after_seconds
        super().__init__(
            f"Faucet cooldown active for {address}; retry in {retry_after_seconds}s"
        )


class SupplyAlreadyIssuedError(StateError):
    """Raised when the initial token supply is issued a second time.

    Attributes:
        symbol: The token symbol.
    """

    def __init__(self, symbol: str) -> None:
        """Initialize the error.

        Args:
            symbol: The token symbol.
        """
        self.symbol = symbol
        super().__init__(f"Initial supply of {symbol} has already been issued")
