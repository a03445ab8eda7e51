"""System clock implementation of TimeAuthorityProtocol."""

from __future__ import annotations

from datetime import datetime, timezone

from signboard.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority reading the host clock."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(timezone.utc)
