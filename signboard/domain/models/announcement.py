"""Announcement domain model.

An announcement is the unit of signage content. Directors request one,
designers move it through production and attach artwork, and once
published it is eligible for the display rotation.

Status Lifecycle (ordered, one step at a time):
    PENDING -> IN_PROGRESS -> AWAITING_APPROVAL -> PUBLISHED

The persisted layout uses the camelCase keys of the signage front end so
collections written by earlier releases keep loading.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class AnnouncementStatus(Enum):
    """Status of an announcement in its production lifecycle.

    States:
        PENDING: Requested by a director, nobody working on it yet
        IN_PROGRESS: A designer is producing the artwork
        AWAITING_APPROVAL: Artwork done, waiting for a director
        PUBLISHED: Approved and eligible for the display rotation

    Statuses are totally ordered by their position in the lifecycle,
    so ``AnnouncementStatus.PENDING < AnnouncementStatus.PUBLISHED``.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    AWAITING_APPROVAL = "awaiting_approval"
    PUBLISHED = "published"

    @property
    def rank(self) -> int:
        """Position of this status in the lifecycle (0 = PENDING)."""
        return _STATUS_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AnnouncementStatus):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AnnouncementStatus):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AnnouncementStatus):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AnnouncementStatus):
            return NotImplemented
        return self.rank >= other.rank


_STATUS_ORDER: tuple[AnnouncementStatus, ...] = (
    AnnouncementStatus.PENDING,
    AnnouncementStatus.IN_PROGRESS,
    AnnouncementStatus.AWAITING_APPROVAL,
    AnnouncementStatus.PUBLISHED,
)


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


def _parse_timestamp(value: str) -> datetime:
    # Front-end timestamps end in "Z", which fromisoformat rejects before 3.11
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True, eq=True)
class Announcement:
    """A signage announcement.

    Attributes:
        id: Unique identifier, assigned at creation and never changed.
        title: Short headline (non-empty).
        description: Briefing text for the designer (non-empty).
        status: Current lifecycle status.
        created_at: Creation timestamp (UTC), immutable.
        updated_at: Timestamp of the last mutation (UTC).
        requested_by: Id of the principal that created it.
        assigned_to: Id of the designer that took it into production.
        image_url: Location of the attached artwork, once there is one.
        display_duration: Seconds on screen; falls back to the display
            default when unset.
        briefing_pdf_url: Location of the briefing document, if one was named.
        briefing_pdf_name: File name of the briefing document.
    """

    id: str
    title: str
    description: str
    requested_by: str
    status: AnnouncementStatus = field(default=AnnouncementStatus.PENDING)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)
    assigned_to: str | None = field(default=None)
    image_url: str | None = field(default=None)
    display_duration: int | None = field(default=None)
    briefing_pdf_url: str | None = field(default=None)
    briefing_pdf_name: str | None = field(default=None)

    @property
    def is_published(self) -> bool:
        """Check if the announcement is eligible for the display."""
        return self.status == AnnouncementStatus.PUBLISHED

    @property
    def has_image(self) -> bool:
        """Check if artwork has been attached."""
        return bool(self.image_url)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted camelCase layout.

        Optional fields that are unset are omitted, matching how the
        front end wrote them.

        Returns:
            JSON-compatible dictionary.
        """
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "createdAt": _format_timestamp(self.created_at),
            "updatedAt": _format_timestamp(self.updated_at),
            "requestedBy": self.requested_by,
        }
        optional = {
            "assignedTo": self.assigned_to,
            "imageUrl": self.image_url,
            "displayDuration": self.display_duration,
            "briefingPdfUrl": self.briefing_pdf_url,
            "briefingPdfName": self.briefing_pdf_name,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Announcement:
        """Deserialize from the persisted camelCase layout.

        Args:
            data: Dictionary produced by to_dict() (or by the front end).

        Returns:
            Announcement instance.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If the status or a timestamp is invalid.
        """
        duration = data.get("displayDuration")
        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data["description"],
            status=AnnouncementStatus(data["status"]),
            created_at=_parse_timestamp(data["createdAt"]),
            updated_at=_parse_timestamp(data["updatedAt"]),
            requested_by=str(data["requestedBy"]),
            assigned_to=data.get("assignedTo"),
            image_url=data.get("imageUrl"),
            display_duration=int(duration) if duration is not None else None,
            briefing_pdf_url=data.get("briefingPdfUrl"),
            briefing_pdf_name=data.get("briefingPdfName"),
        )


@dataclass(frozen=True)
class AnnouncementPatch:
    """Partial update of an announcement.

    Only fields that are not None are applied. ``assigned_to`` is not part
    of the patch: it is only ever set as a side effect of a status change.

    Attributes:
        status: New lifecycle status.
        image_url: Artwork location to attach.
        display_duration: Seconds on screen.
    """

    status: AnnouncementStatus | None = None
    image_url: str | None = None
    display_duration: int | None = None

    @property
    def is_empty(self) -> bool:
        """Check if the patch carries no field changes."""
        return (
            self.status is None
            and self.image_url is None
            and self.display_duration is None
        )
