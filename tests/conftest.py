"""
Pytest configuration and shared fixtures for Signboard tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Time-dependent tests use FakeTimeAuthority; timer tests use ManualSleeper
"""

from datetime import datetime, timezone

import pytest

from signboard.application.services.announcement_repository import (
    AnnouncementRepository,
)
from signboard.application.services.display_settings_service import (
    DisplaySettingsService,
)
from signboard.config.workflow_config import TEST_WORKFLOW_CONFIG
from signboard.domain.models.principal import Principal, UserRole
from signboard.infrastructure.stubs import PersistentStoreStub
from tests.helpers import FakeTimeAuthority, ManualSleeper


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from signboard import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Provide a clock frozen at 2026-01-15T10:00:00 UTC."""
    return FakeTimeAuthority(
        frozen_at=datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
    )


@pytest.fixture
def manual_sleeper() -> ManualSleeper:
    """Provide a sleep function whose wake-ups the test triggers."""
    return ManualSleeper()


@pytest.fixture
def store() -> PersistentStoreStub:
    """Provide an empty in-memory persistent store."""
    return PersistentStoreStub()


@pytest.fixture
def repository(
    store: PersistentStoreStub, fake_time_authority: FakeTimeAuthority
) -> AnnouncementRepository:
    """Provide a repository with no simulated latency."""
    return AnnouncementRepository(
        store=store,
        time_authority=fake_time_authority,
        config=TEST_WORKFLOW_CONFIG,
    )


@pytest.fixture
def settings_service(store: PersistentStoreStub) -> DisplaySettingsService:
    """Provide a display settings service with the stock defaults."""
    return DisplaySettingsService(store=store)


@pytest.fixture
def admin() -> Principal:
    return Principal(
        id="1", email="admin@example.com", name="Admin User", role=UserRole.ADMIN
    )


@pytest.fixture
def director() -> Principal:
    return Principal(
        id="2",
        email="director@example.com",
        name="Director User",
        role=UserRole.DIRECTOR,
    )


@pytest.fixture
def designer() -> Principal:
    return Principal(
        id="3",
        email="designer@example.com",
        name="Designer User",
        role=UserRole.DESIGNER,
    )
