"""Dashboard statistics view model."""

from __future__ import annotations

from dataclasses import dataclass, field

from signboard.domain.models.announcement import Announcement, AnnouncementStatus


@dataclass(frozen=True)
class DashboardStats:
    """Derived counts over the announcement collection.

    Recomputed on demand, never stored.

    Attributes:
        counts_by_status: Number of announcements in each status (every
            status present, zero included).
        total: Size of the collection.
        recent: Up to five announcements, most recently updated first.
    """

    counts_by_status: dict[AnnouncementStatus, int] = field(default_factory=dict)
    total: int = 0
    recent: tuple[Announcement, ...] = ()

    def count(self, status: AnnouncementStatus) -> int:
        """Get the count for one status."""
        return self.counts_by_status.get(status, 0)
