"""Demo announcements for a fresh installation.

One announcement in every status, requested by the demo director and
produced by the demo designer, with timestamps relative to ``now``.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from signboard.domain.models.announcement import Announcement, AnnouncementStatus

_DIRECTOR_ID = "2"
_DESIGNER_ID = "3"


def demo_announcements(now: datetime) -> tuple[Announcement, ...]:
    """Build the demo collection.

    Args:
        now: Reference time; creation dates are placed days before it.

    Returns:
        Five announcements in insertion order, two of them published.
    """

    def days_ago(days: int) -> datetime:
        return now - timedelta(days=days)

    return (
        Announcement(
            id="1",
            title="Welcome Week Events",
            description="Create a poster with all the welcome week events for new students",
            status=AnnouncementStatus.PUBLISHED,
            created_at=days_ago(7),
            updated_at=days_ago(5),
            requested_by=_DIRECTOR_ID,
            assigned_to=_DESIGNER_ID,
            image_url="https://source.unsplash.com/random/1200x800/?university,event",
            display_duration=8,
        ),
        Announcement(
            id="2",
            title="Library Hours Change",
            description="Create an announcement for new library hours during exam period",
            status=AnnouncementStatus.AWAITING_APPROVAL,
            created_at=days_ago(3),
            updated_at=days_ago(1),
            requested_by=_DIRECTOR_ID,
            assigned_to=_DESIGNER_ID,
            image_url="https://source.unsplash.com/random/1200x800/?library,study",
            display_duration=6,
        ),
        Announcement(
            id="3",
            title="Career Fair",
            description=(
                "Design a poster for the upcoming career fair with all "
                "participating companies"
            ),
            status=AnnouncementStatus.IN_PROGRESS,
            created_at=days_ago(2),
            updated_at=days_ago(1),
            requested_by=_DIRECTOR_ID,
            assigned_to=_DESIGNER_ID,
        ),
        Announcement(
            id="4",
            title="Sports Tournament",
            description="Create graphics for the inter-college sports tournament",
            status=AnnouncementStatus.PENDING,
            created_at=now,
            updated_at=now,
            requested_by=_DIRECTOR_ID,
        ),
        Announcement(
            id="5",
            title="Graduation Ceremony",
            description=(
                "Design poster for graduation ceremony with date, time and "
                "venue details"
            ),
            status=AnnouncementStatus.PUBLISHED,
            created_at=days_ago(10),
            updated_at=days_ago(8),
            requested_by=_DIRECTOR_ID,
            assigned_to=_DESIGNER_ID,
            image_url="https://source.unsplash.com/random/1200x800/?graduation,ceremony",
            display_duration=7,
        ),
    )
