"""Unit tests for the announcement, principal and display settings models."""

from datetime import datetime, timezone

import pytest

from signboard.domain.models.announcement import (
    Announcement,
    AnnouncementPatch,
    AnnouncementStatus,
)
from signboard.domain.models.dashboard_stats import DashboardStats
from signboard.domain.models.display_settings import DisplaySettings
from signboard.domain.models.principal import Principal, UserRole
from tests.helpers import make_announcement


class TestAnnouncementStatus:
    """Tests for the ordered status enum."""

    def test_values(self) -> None:
        assert AnnouncementStatus.PENDING.value == "pending"
        assert AnnouncementStatus.IN_PROGRESS.value == "in_progress"
        assert AnnouncementStatus.AWAITING_APPROVAL.value == "awaiting_approval"
        assert AnnouncementStatus.PUBLISHED.value == "published"

    def test_ordering(self) -> None:
        """Statuses compare by lifecycle position."""
        assert AnnouncementStatus.PENDING < AnnouncementStatus.IN_PROGRESS
        assert AnnouncementStatus.PUBLISHED > AnnouncementStatus.AWAITING_APPROVAL
        assert AnnouncementStatus.PUBLISHED >= AnnouncementStatus.PUBLISHED
        assert sorted(AnnouncementStatus, reverse=True)[0] == AnnouncementStatus.PUBLISHED

    def test_rank(self) -> None:
        assert AnnouncementStatus.PENDING.rank == 0
        assert AnnouncementStatus.PUBLISHED.rank == 3


class TestAnnouncement:
    """Tests for the Announcement record."""

    def test_is_frozen(self) -> None:
        announcement = make_announcement()
        with pytest.raises(AttributeError):
            announcement.title = "changed"  # type: ignore[misc]

    def test_is_published_and_has_image(self) -> None:
        assert make_announcement(status=AnnouncementStatus.PUBLISHED).is_published
        assert not make_announcement().is_published
        assert make_announcement(image_url="art.png").has_image
        assert not make_announcement().has_image

    def test_to_dict_uses_persisted_layout(self) -> None:
        """Keys are camelCase and unset optionals are omitted."""
        data = make_announcement("7", display_duration=8).to_dict()

        assert data["id"] == "7"
        assert data["status"] == "pending"
        assert data["requestedBy"] == "2"
        assert data["displayDuration"] == 8
        assert data["createdAt"] == "2026-01-15T09:00:00Z"
        assert "imageUrl" not in data
        assert "assignedTo" not in data

    def test_from_dict_restores_announcement(self) -> None:
        original = make_announcement(
            "9",
            status=AnnouncementStatus.AWAITING_APPROVAL,
            assigned_to="3",
            image_url="art.png",
            display_duration=6,
            briefing_pdf_url="mock-url/brief.pdf",
            briefing_pdf_name="brief.pdf",
        )
        assert Announcement.from_dict(original.to_dict()) == original

    def test_from_dict_accepts_zulu_timestamps(self) -> None:
        data = {
            "id": "1",
            "title": "Welcome",
            "description": "Week one",
            "status": "published",
            "createdAt": "2024-03-01T08:30:00.000Z",
            "updatedAt": "2024-03-02T08:30:00.000Z",
            "requestedBy": "2",
        }
        announcement = Announcement.from_dict(data)
        assert announcement.created_at == datetime(
            2024, 3, 1, 8, 30, tzinfo=timezone.utc
        )

    def test_from_dict_rejects_unknown_status(self) -> None:
        data = make_announcement().to_dict()
        data["status"] = "archived"
        with pytest.raises(ValueError):
            Announcement.from_dict(data)


class TestAnnouncementPatch:
    def test_empty_patch(self) -> None:
        assert AnnouncementPatch().is_empty
        assert not AnnouncementPatch(display_duration=5).is_empty


class TestPrincipal:
    def test_round_trip_for_session_entry(self) -> None:
        principal = Principal(id="1", email="a@b.co", name="Ann", role=UserRole.ADMIN)
        assert Principal.from_dict(principal.to_dict()) == principal
        assert principal.is_admin

    def test_unknown_role_rejected(self) -> None:
        with pytest.raises(ValueError):
            Principal.from_dict({"id": "1", "email": "a@b.co", "name": "A", "role": "owner"})


class TestDisplaySettings:
    """Tests for DisplaySettings validation and persistence layout."""

    def test_defaults(self) -> None:
        settings = DisplaySettings()
        assert settings.carousel_speed == 5
        assert settings.default_duration == 10
        assert settings.refresh_rate_seconds == 60

    @pytest.mark.parametrize("value", [0, -1, True, "10"])
    def test_rejects_invalid_values(self, value) -> None:
        with pytest.raises(ValueError):
            DisplaySettings(default_duration=value)

    def test_persisted_keys(self) -> None:
        assert DisplaySettings(carousel_speed=3).to_dict() == {
            "carouselSpeed": 3,
            "defaultDuration": 10,
            "refreshRate": 60,
        }

    def test_from_dict_fills_missing_from_defaults(self) -> None:
        defaults = DisplaySettings(refresh_rate_seconds=30)
        settings = DisplaySettings.from_dict({"defaultDuration": 12}, defaults=defaults)
        assert settings == DisplaySettings(default_duration=12, refresh_rate_seconds=30)

    @pytest.mark.parametrize("stored", [7.9, "12", None])
    def test_from_dict_rejects_non_integer_values(self, stored) -> None:
        with pytest.raises(ValueError):
            DisplaySettings.from_dict({"defaultDuration": stored})

    @pytest.mark.parametrize("data", [[], 5, "x"])
    def test_from_dict_rejects_non_objects(self, data) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            DisplaySettings.from_dict(data)


class TestDashboardStats:
    def test_count_defaults_to_zero(self) -> None:
        stats = DashboardStats(counts_by_status={AnnouncementStatus.PENDING: 2}, total=2)
        assert stats.count(AnnouncementStatus.PENDING) == 2
        assert stats.count(AnnouncementStatus.PUBLISHED) == 0
