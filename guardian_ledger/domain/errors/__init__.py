"""Domain errors for Guardian Ledger.

Provides specific exception classes for different failure scenarios,
grouped into four families the outer API layer maps onto transport codes:

- ValidationError: malformed or empty input
- StateError: the current ledger state forbids the operation
- AuthorizationError: the caller lacks the required role
- NotFoundError: the addressed user or report does not exist

All exceptions inherit from LedgerError.
"""

from guardian_ledger.domain.errors.append_only import AppendOnlyViolationError
from guardian_ledger.domain.errors.authorization import (
    AdminOnlyError,
    AuthorizationError,
    NotReporterError,
    UnauthorizedError,
    VerificationRequiredError,
)
from guardian_ledger.domain.errors.not_found import (
    NotFoundError,
    ReportNotFoundError,
    UserNotRegisteredError,
)
from guardian_ledger.domain.errors.stake import (
    StakeNotYetConfirmedError,
    StakeRejectedError,
    StakeReplayError,
    TransferSourceUnavailableError,
)
from guardian_ledger.domain.errors.state import (
    AlreadyRegisteredError,
    AlreadyVerifiedError,
    ClosedImmutableError,
    DoubleClaimError,
    FaucetCooldownError,
    IllegalTransitionError,
    InsufficientBalanceError,
    NotVerifiedError,
    StateError,
    SupplyAlreadyIssuedError,
)
from guardian_ledger.domain.errors.validation import (
    ContentIntegrityError,
    EmptyContentError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidLimitError,
    InvalidStatusCodeError,
    ValidationError,
)

__all__: list[str] = [
    "AdminOnlyError",
    "AlreadyRegisteredError",
    "AlreadyVerifiedError",
    "AppendOnlyViolationError",
    "AuthorizationError",
    "ClosedImmutableError",
    "ContentIntegrityError",
    "DoubleClaimError",
    "EmptyContentError",
    "FaucetCooldownError",
    "IllegalTransitionError",
    "InsufficientBalanceError",
    "InvalidAddressError",
    "InvalidAmountError",
    "InvalidLimitError",
    "InvalidStatusCodeError",
    "NotFoundError",
    "NotReporterError",
    "NotVerifiedError",
    "ReportNotFoundError",
    "StakeNotYetConfirmedError",
    "StakeRejectedError",
    "StakeReplayError",
    "StateError",
    "SupplyAlreadyIssuedError",
    "TransferSourceUnavailableError",
    "UnauthorizedError",
    "UserNotRegisteredError",
    "ValidationError",
    "VerificationRequiredError",
]
