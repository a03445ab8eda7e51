"""Integration tests: an announcement from request to the display.

Wires the real services over the in-memory store and drives them the
way the screens do: sign in, act, sign out, sign in as someone else.
"""

import pytest

from signboard.bootstrap import SignageContainer, build_signage
from signboard.config import TEST_WORKFLOW_CONFIG, DisplayConfig
from signboard.domain.errors import AuthorizationError, ValidationError
from signboard.domain.models.announcement import AnnouncementPatch, AnnouncementStatus
from tests.helpers import ManualSleeper


@pytest.fixture
async def signage() -> SignageContainer:
    container = build_signage(TEST_WORKFLOW_CONFIG, DisplayConfig())
    await container.start()
    return container


async def sign_in_as(signage: SignageContainer, role: str) -> None:
    await signage.sessions.logout()
    await signage.sessions.authenticate(f"{role}@example.com", f"{role}123")


class TestAnnouncementLifecycle:
    """Director requests, designer produces, director approves."""

    async def test_director_blocked_while_in_production(
        self, signage: SignageContainer
    ) -> None:
        await sign_in_as(signage, "director")
        director = signage.sessions.require_principal()
        created = await signage.repository.create("Fair", "Career fair poster", director)

        assert created.status == AnnouncementStatus.PENDING
        assert created.requested_by == director.id
        assert created.assigned_to is None

        await sign_in_as(signage, "designer")
        designer = signage.sessions.require_principal()
        taken = await signage.repository.update(
            created.id, AnnouncementPatch(status=AnnouncementStatus.IN_PROGRESS), designer
        )

        assert taken.status == AnnouncementStatus.IN_PROGRESS
        assert taken.assigned_to == designer.id

        with pytest.raises(AuthorizationError):
            await signage.repository.update(
                created.id,
                AnnouncementPatch(status=AnnouncementStatus.PUBLISHED),
                director,
            )
        assert signage.repository.get(created.id).status == AnnouncementStatus.IN_PROGRESS

    async def test_empty_title_adds_nothing(self, signage: SignageContainer) -> None:
        await sign_in_as(signage, "director")

        with pytest.raises(ValidationError):
            await signage.workflow.request_announcement("", "Career fair poster")

        assert signage.repository.list_by_status(AnnouncementStatus.PENDING) == ()

    async def test_full_workflow_reaches_the_display(
        self, signage: SignageContainer
    ) -> None:
        sleeper = ManualSleeper()
        display = signage.new_display(sleep=sleeper)
        await display.activate()
        await sleeper.settle()
        assert display.snapshot().is_idle

        await sign_in_as(signage, "director")
        created = await signage.workflow.request_announcement("Fair", "Career fair poster")

        await sign_in_as(signage, "designer")
        await signage.workflow.advance(created.id)
        await signage.workflow.attach_image(created.id, "fair.png")
        await signage.workflow.advance(created.id)
        await signage.workflow.set_display_duration(created.id, 12)
        with pytest.raises(AuthorizationError):
            await signage.workflow.advance(created.id)

        await sign_in_as(signage, "director")
        published = await signage.workflow.advance(created.id)
        assert published.status == AnnouncementStatus.PUBLISHED

        await sleeper.fire(signage.settings.defaults.refresh_rate_seconds)

        state = display.snapshot()
        assert state.current.id == created.id
        assert state.duration_seconds == 12
        assert 12 in sleeper.pending

        await display.deactivate()
        await sleeper.settle()
        assert sleeper.pending == []

    async def test_display_deletion_removes_announcement(
        self, signage: SignageContainer
    ) -> None:
        await sign_in_as(signage, "admin")
        for title in ("One", "Two", "Three"):
            created = await signage.workflow.request_announcement(title, "Poster")
            for _ in range(3):
                await signage.workflow.advance(created.id)

        sleeper = ManualSleeper()
        display = signage.new_display(sleep=sleeper)
        await display.activate()
        display.select(2)
        last_id = display.current.id

        await display.delete(last_id)

        assert display.current_index == 1
        assert len(display.items) == 2
        assert all(a.id != last_id for a in signage.repository.list_all())
        await display.deactivate()
