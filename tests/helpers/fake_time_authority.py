"""FakeTimeAuthority - Controllable time authority for deterministic tests.

Usage:
    >>> fake_time = FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10, 0, tzinfo=timezone.utc))
    >>> registry = IdentityRegistryService(..., time_authority=fake_time, ...)
    >>> fake_time.advance(seconds=3600)  # 1 hour later

The monotonic clock is tied to time advancement:

    >>> m1 = fake_time.monotonic()
    >>> fake_time.advance(seconds=10)
    >>> assert fake_time.monotonic() - m1 == 10.0
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from guardian_ledger.application.ports.time_authority import TimeAuthorityProtocol


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Controllable time authority for deterministic tests.

    Time only moves when advance() or set_time() is called.
    """

    def __init__(
        self,
        frozen_at: datetime | None = None,
        *,
        start_monotonic: float = 0.0,
    ) -> None:
        """Initialize the fake time authority.

        Args:
            frozen_at: Optional datetime to freeze time at. Defaults to
                2026-01-01T00:00:00 UTC. Naive datetimes are taken as UTC.
            start_monotonic: Starting value for monotonic clock.
        """
        if frozen_at is None:
            frozen_at = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        if frozen_at.tzinfo is None:
            frozen_at = frozen_at.replace(tzinfo=timezone.utc)

        self._current_time: datetime = frozen_at
        self._monotonic_base: float = start_monotonic
        self._monotonic_advances: float = 0.0

    def now(self) -> datetime:
        """Return the controlled current time."""
        return self._current_time

    def utcnow(self) -> datetime:
        """Return the controlled current UTC time."""
        return self._current_time

    def monotonic(self) -> float:
        """Return the controlled monotonic clock value."""
        return self._monotonic_base + self._monotonic_advances

    def advance(
        self,
        seconds: float | int | None = None,
        delta: timedelta | None = None,
    ) -> None:
        """Advance time by the specified amount.

        Raises:
            ValueError: If neither argument is given or the amount is negative.
        """
        if delta is not None:
            advance_seconds = delta.total_seconds()
        elif seconds is not None:
            advance_seconds = float(seconds)
        else:
            raise ValueError("Must provide either 'seconds' or 'delta' argument")

        if advance_seconds < 0:
            raise ValueError(
                f"Cannot advance time backwards. Got {advance_seconds} seconds. "
                "Use set_time() for explicit time changes."
            )

        self._current_time += timedelta(seconds=advance_seconds)
        self._monotonic_advances += advance_seconds

    def set_time(self, new_time: datetime) -> None:
        """Set the current time directly (monotonic clock is unaffected)."""
        if new_time.tzinfo is None:
            new_time = new_time.replace(tzinfo=timezone.utc)
        self._current_time = new_time
