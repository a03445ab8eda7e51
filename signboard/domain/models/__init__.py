"""Domain models for Signboard."""

from signboard.domain.models.announcement import (
    Announcement,
    AnnouncementPatch,
    AnnouncementStatus,
)
from signboard.domain.models.dashboard_stats import DashboardStats
from signboard.domain.models.display_settings import DisplaySettings
from signboard.domain.models.principal import Principal, UserRole

__all__: list[str] = [
    "Announcement",
    "AnnouncementPatch",
    "AnnouncementStatus",
    "DashboardStats",
    "DisplaySettings",
    "Principal",
    "UserRole",
]
