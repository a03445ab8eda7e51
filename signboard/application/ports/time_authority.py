"""Time Authority Protocol - interface for consistent timestamp provisioning.

All services that stamp announcements MUST inject a TimeAuthorityProtocol
implementation instead of calling datetime.now() directly, so tests can
freeze and advance time.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    For production:
        Use SystemTimeAuthority from signboard.infrastructure.adapters.time

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC)."""
        ...
