"""Display scheduler service.

Rotates the public display through the published announcements.

The scheduler owns two timers, both asyncio tasks:

- the per-item timer, armed for the current item's display_duration (or
  the default duration) and advancing the index when it expires;
- the refresh timer, reloading the published subset every
  refresh_rate_seconds.

Arming a timer always cancels the previous one first, and every armed
timer carries a generation number: a timer that was replaced after it
woke up but before it ran sees a newer generation and does nothing. So
there is never more than one live per-item timer, and deactivate()
leaves nothing behind that could fire.
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from structlog import get_logger

from signboard.domain.models.display_settings import DisplaySettings

if TYPE_CHECKING:
    from signboard.application.services.announcement_repository import (
        AnnouncementRepository,
    )
    from signboard.application.services.announcement_workflow_service import (
        AnnouncementWorkflowService,
    )
    from signboard.application.services.display_settings_service import (
        DisplaySettingsService,
    )
    from signboard.domain.models.announcement import Announcement

logger = get_logger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class DisplayState:
    """What the display should render right now.

    Attributes:
        items: Published announcements in rotation order.
        current_index: Index of the announcement on screen.
        current: The announcement on screen, None when idle.
        duration_seconds: How long the current announcement stays up.
        transition_seconds: Length of the slide transition.
    """

    items: tuple[Announcement, ...]
    current_index: int
    current: Announcement | None
    duration_seconds: int | None
    transition_seconds: int

    @property
    def is_idle(self) -> bool:
        """Check if there is nothing to show."""
        return not self.items


class DisplayScheduler:
    """Timed rotation over the published announcements.

    Example:
        >>> scheduler = DisplayScheduler(
        ...     repository=repository,
        ...     settings_service=settings_service,
        ...     workflow=workflow,
        ... )
        >>> await scheduler.activate()
        >>> scheduler.snapshot().current
        >>> await scheduler.deactivate()
    """

    def __init__(
        self,
        *,
        repository: AnnouncementRepository,
        settings_service: DisplaySettingsService,
        workflow: AnnouncementWorkflowService,
        sleep: SleepFunc = asyncio.sleep,
        on_change: Callable[[DisplayState], None] | None = None,
    ) -> None:
        """Initialize an inactive scheduler with no items.

        Args:
            repository: Source of the published subset.
            settings_service: Source of durations and refresh rate.
            workflow: Performs deletions on behalf of the signed-in
                principal.
            sleep: Awaitable delay used by both timers.
            on_change: Called with the new state whenever the items or the
                current index change.
        """
        self._repository = repository
        self._settings_service = settings_service
        self._workflow = workflow
        self._sleep = sleep
        self._on_change = on_change
        self._settings: DisplaySettings = settings_service.defaults
        self._items: tuple[Announcement, ...] = ()
        self._index = 0
        self._active = False
        self._timer_task: asyncio.Task[None] | None = None
        self._timer_generation = 0
        self._refresh_task: asyncio.Task[None] | None = None

    @property
    def items(self) -> tuple[Announcement, ...]:
        """Get the announcements in rotation."""
        return self._items

    @property
    def current_index(self) -> int:
        """Get the index of the announcement on screen."""
        return self._index

    @property
    def current(self) -> Announcement | None:
        """Get the announcement on screen, or None when idle."""
        if not self._items:
            return None
        return self._items[self._index]

    @property
    def settings(self) -> DisplaySettings:
        """Get the display settings in effect."""
        return self._settings

    @property
    def is_active(self) -> bool:
        """Check if the scheduler is running its timers."""
        return self._active

    @property
    def timer_armed(self) -> bool:
        """Check if a per-item timer is pending."""
        return self._timer_task is not None and not self._timer_task.done()

    def current_duration(self) -> int | None:
        """Get the on-screen seconds for the current item, None when idle."""
        if not self._items:
            return None
        return self._duration_for(self._index)

    def snapshot(self) -> DisplayState:
        """Capture the state the display should render."""
        return DisplayState(
            items=self._items,
            current_index=self._index,
            current=self.current,
            duration_seconds=self.current_duration(),
            transition_seconds=self._settings.carousel_speed,
        )

    async def activate(self) -> None:
        """Start rotating.

        Loads the settings and the published subset, arms the per-item
        timer and starts the periodic refresh. Calling it again while
        active does nothing. If the first load fails the scheduler stays
        inactive and the error propagates, so activate() can be retried.
        """
        if self._active:
            logger.debug("display_already_active")
            return

        self._active = True
        try:
            await self.refresh()
        except Exception as e:
            self._active = False
            self._cancel_timer()
            logger.warning("display_activation_failed", error=str(e))
            raise
        self._refresh_task = asyncio.create_task(self._refresh_loop())
        logger.info(
            "display_activated",
            items=len(self._items),
            refresh_rate_seconds=self._settings.refresh_rate_seconds,
        )

    async def deactivate(self) -> None:
        """Stop rotating and cancel both timers.

        Waits until the cancelled timers have finished, so nothing can fire
        against this scheduler afterwards. Calling it while inactive does
        nothing.
        """
        if not self._active:
            logger.debug("display_not_active")
            return

        self._active = False
        timer_task = self._timer_task
        refresh_task = self._refresh_task
        self._cancel_timer()
        self._refresh_task = None

        current = asyncio.current_task()
        for task in (timer_task, refresh_task):
            if task is None or task is current:
                continue
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

        logger.info("display_deactivated")

    async def refresh(self) -> None:
        """Replace the rotation with the current published subset.

        Keeps the repository's order. An index that no longer fits resets
        to 0. The per-item timer is only re-armed when the items or the
        index actually changed, so refreshing an unchanged repository does
        not restart the current slide.
        """
        self._settings = await self._settings_service.load()
        items = tuple(self._repository.list_published())
        index = self._index if self._index < len(items) else 0

        changed = items != self._items or index != self._index
        self._items = items
        self._index = index

        if changed:
            logger.debug("display_refreshed", items=len(items), current_index=index)
            self._arm_timer()
            self._notify()
        elif self._active and items and not self.timer_armed:
            self._arm_timer()

    def advance(self) -> None:
        """Move to the next item, wrapping after the last one.

        This is what per-item timer expiry does. Does nothing when idle.
        """
        if not self._items:
            return
        self._index = (self._index + 1) % len(self._items)
        logger.debug("display_advanced", current_index=self._index)
        self._arm_timer()
        self._notify()

    def select(self, index: int) -> None:
        """Jump to an item chosen by hand and restart its timer.

        Args:
            index: Position in the rotation.

        Raises:
            IndexError: If there is no item at that position.
        """
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"Display index {index} out of range for {len(self._items)} items"
            )
        self._index = index
        logger.debug("display_selected", current_index=index)
        self._arm_timer()
        self._notify()

    async def delete(self, announcement_id: str) -> None:
        """Delete an announcement from the repository and the rotation.

        The deletion runs through the workflow as the signed-in principal
        and reaches the repository first. If it fails, the error propagates
        and the rotation is left exactly as it was. On success the item
        leaves the rotation and an index that no longer fits is clamped to
        the last item.

        Args:
            announcement_id: Id of the announcement to delete.

        Raises:
            AnnouncementNotFoundError: If the repository does not know the id.
            AuthenticationError: If nobody is signed in.
        """
        try:
            await self._workflow.delete(announcement_id)
        except Exception as e:
            logger.warning(
                "display_delete_failed",
                announcement_id=announcement_id,
                error=str(e),
            )
            raise

        position = next(
            (i for i, item in enumerate(self._items) if item.id == announcement_id),
            None,
        )
        if position is None:
            return

        self._items = self._items[:position] + self._items[position + 1 :]
        if self._index >= len(self._items):
            self._index = max(0, len(self._items) - 1)
        logger.info(
            "display_item_deleted",
            announcement_id=announcement_id,
            current_index=self._index,
            items=len(self._items),
        )
        self._arm_timer()
        self._notify()

    def _duration_for(self, index: int) -> int:
        return self._items[index].display_duration or self._settings.default_duration

    def _cancel_timer(self) -> None:
        self._timer_generation += 1
        task = self._timer_task
        self._timer_task = None
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()

    def _arm_timer(self) -> None:
        self._cancel_timer()
        if not self._active or not self._items:
            return
        duration = self._duration_for(self._index)
        generation = self._timer_generation
        self._timer_task = asyncio.create_task(self._expire_after(duration, generation))

    async def _expire_after(self, duration: int, generation: int) -> None:
        await self._sleep(duration)
        if generation != self._timer_generation or not self._active:
            return
        self._timer_task = None
        self.advance()

    async def _refresh_loop(self) -> None:
        while self._active:
            await self._sleep(self._settings.refresh_rate_seconds)
            try:
                await self.refresh()
            except Exception as e:
                logger.error("display_refresh_failed", error=str(e), exc_info=True)

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())
