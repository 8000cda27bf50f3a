"""Base exception classes for the Guardian Ledger domain layer."""


class LedgerError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application and
    lets the outer API layer map whole families of failures (validation,
    state, authorization, not-found) onto transport-level responses.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
