"""FakeTimeAuthority - Controllable time authority for deterministic tests.

Announcement timestamps come from the injected time authority, so tests
that care about ordering (dashboard "recent", updated_at refresh) freeze
the clock and advance it explicitly.

Usage:
    >>> fake_time = FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10, 0, tzinfo=timezone.utc))
    >>> repository = AnnouncementRepository(store, fake_time, TEST_WORKFLOW_CONFIG)
    >>> fake_time.advance(seconds=60)
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from signboard.application.ports.time_authority import TimeAuthorityProtocol

DEFAULT_FROZEN_AT = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Controllable time authority for deterministic tests.

    Time never moves on its own; call advance() or set_time().
    """

    def __init__(self, frozen_at: datetime | None = None) -> None:
        """Initialize the fake time authority.

        Args:
            frozen_at: Time to freeze at. Defaults to 2026-01-01T00:00:00 UTC.
                A naive datetime is taken as UTC.
        """
        frozen_at = frozen_at or DEFAULT_FROZEN_AT
        if frozen_at.tzinfo is None:
            frozen_at = frozen_at.replace(tzinfo=timezone.utc)
        self._current_time = frozen_at

    def now(self) -> datetime:
        """Return the controlled current time."""
        return self._current_time

    def advance(
        self,
        seconds: float | int | None = None,
        delta: timedelta | None = None,
    ) -> None:
        """Advance time by the specified amount.

        Raises:
            ValueError: If neither argument is given, or the amount is negative.
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

    def set_time(self, dt: datetime) -> None:
        """Set the current time, forwards or backwards."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        self._current_time = dt

    def __repr__(self) -> str:
        return f"FakeTimeAuthority(current_time={self._current_time.isoformat()})"
