"""Test helpers for Signboard tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    ManualSleeper: Hand-driven sleep for the display scheduler timers
    make_announcement: Announcement builder with test defaults

Usage:
    from tests.helpers import FakeTimeAuthority, ManualSleeper
"""

from tests.helpers.announcement_factory import make_announcement
from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.manual_sleeper import ManualSleeper

__all__ = ["FakeTimeAuthority", "ManualSleeper", "make_announcement"]
