"""System clock implementation of TimeAuthorityProtocol."""

import time
from datetime import datetime, timezone

from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Production time authority backed by the system clock."""

    def now(self) -> datetime:
        """Return the current time in UTC."""
        return datetime.now(timezone.utc)

    def utcnow(self) -> datetime:
        """Return the current time in UTC."""
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        """Return time.monotonic()."""
        return time.monotonic()
