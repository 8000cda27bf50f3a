"""Time authority port.

Every service that stamps a record injects a TimeAuthorityProtocol
instead of calling datetime.now() directly, so tests can freeze and
advance the clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    For production use SystemTimeAuthority from
    guardian_ledger.infrastructure.adapters; for tests use
    FakeTimeAuthority from tests/helpers/fake_time_authority.py.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time with timezone information (UTC)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return the current UTC time, timezone-aware."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock value in seconds.

        Only differences between two values are meaningful.
        """
        ...
