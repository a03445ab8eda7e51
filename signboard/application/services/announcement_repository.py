"""Announcement repository.

Owns the canonical in-memory collection of announcements and mirrors it
to the persistent store after every mutation.

Mutation rules:
- Each mutation awaits the configured simulated latency first; that await
  is the only suspension point.
- Mutations are serialized through one lock, so a caller's operation N is
  visible to its operation N+1.
- The new collection is built, persisted as a whole, and only then swapped
  in. A caller that sees a result also sees the collection updated; a
  failed write leaves memory untouched.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Iterable, Sequence
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import TYPE_CHECKING

from structlog import get_logger
from uuid6 import uuid7

from signboard.application.ports.persistent_store import ANNOUNCEMENTS_KEY
from signboard.domain.errors import (
    AnnouncementNotFoundError,
    AuthorizationError,
    ValidationError,
)
from signboard.domain.models.announcement import (
    Announcement,
    AnnouncementPatch,
    AnnouncementStatus,
)
from signboard.domain.models.dashboard_stats import DashboardStats
from signboard.domain.models.principal import UserRole
from signboard.domain.services.lifecycle_policy import authorize_patch

if TYPE_CHECKING:
    from signboard.application.ports.persistent_store import PersistentStoreProtocol
    from signboard.application.ports.time_authority import TimeAuthorityProtocol
    from signboard.config.workflow_config import WorkflowConfig
    from signboard.domain.models.principal import Principal

logger = get_logger(__name__)

RECENT_ANNOUNCEMENTS_LIMIT = 5


def _require_text(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty", field=field_name)
    return value


def _validate_patch(patch: AnnouncementPatch) -> None:
    if patch.status is not None and not isinstance(patch.status, AnnouncementStatus):
        raise ValidationError(f"Unknown status {patch.status!r}", field="status")
    if patch.image_url is not None:
        _require_text(patch.image_url, "image_url")
    duration = patch.display_duration
    if duration is not None and (
        isinstance(duration, bool) or not isinstance(duration, int) or duration < 1
    ):
        raise ValidationError(
            f"display_duration must be a positive integer, got {duration!r}",
            field="display_duration",
        )


class AnnouncementRepository:
    """Repository of announcements backed by a persistent store.

    Example:
        >>> repository = AnnouncementRepository(
        ...     store=store,
        ...     time_authority=SystemTimeAuthority(),
        ...     config=WorkflowConfig.from_environment(),
        ... )
        >>> await repository.load()
        >>> created = await repository.create("Fair", "Career fair poster", director)
    """

    def __init__(
        self,
        store: PersistentStoreProtocol,
        time_authority: TimeAuthorityProtocol,
        config: WorkflowConfig,
    ) -> None:
        """Initialize the repository with an empty collection.

        Args:
            store: Persistent store mirroring the collection.
            time_authority: Source of creation/update timestamps.
            config: Workflow configuration (simulated latency).
        """
        self._store = store
        self._time = time_authority
        self._latency = config.simulated_latency_seconds
        self._announcements: tuple[Announcement, ...] = ()
        self._write_lock = asyncio.Lock()
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        """Number of mutations waiting on simulated latency or the lock."""
        return self._in_flight

    @property
    def is_busy(self) -> bool:
        """Check if any mutation is still in flight."""
        return self._in_flight > 0

    async def load(self, seed: Sequence[Announcement] | None = None) -> None:
        """Load the collection from the store.

        When the store holds no collection yet and ``seed`` is given, the
        seed is installed and persisted.

        Args:
            seed: Announcements to start from on an empty store.

        Raises:
            ValueError: If the stored collection cannot be decoded.
        """
        raw = await self._store.get(ANNOUNCEMENTS_KEY)
        if raw is not None:
            self._announcements = tuple(
                Announcement.from_dict(item) for item in json.loads(raw)
            )
            logger.info("announcements_loaded", count=len(self._announcements))
            return

        if seed:
            await self._persist(seed)
            self._announcements = tuple(seed)
            logger.info("announcements_seeded", count=len(self._announcements))
        else:
            self._announcements = ()
            logger.info("announcements_empty")

    async def create(
        self,
        title: str,
        description: str,
        requested_by: Principal,
        briefing_pdf_name: str | None = None,
    ) -> Announcement:
        """Create a PENDING announcement.

        Args:
            title: Headline, must not be blank.
            description: Briefing text, must not be blank.
            requested_by: The creating principal.
            briefing_pdf_name: Optional briefing document file name.

        Returns:
            The stored announcement.

        Raises:
            ValidationError: If title or description is blank.
        """
        _require_text(title, "title")
        _require_text(description, "description")

        async with self._mutation():
            now = self._time.now()
            announcement = Announcement(
                id=str(uuid7()),
                title=title,
                description=description,
                status=AnnouncementStatus.PENDING,
                created_at=now,
                updated_at=now,
                requested_by=requested_by.id,
                briefing_pdf_url=(
                    f"mock-url/{briefing_pdf_name}" if briefing_pdf_name else None
                ),
                briefing_pdf_name=briefing_pdf_name or None,
            )
            await self._commit((*self._announcements, announcement))

        logger.info(
            "announcement_created",
            announcement_id=announcement.id,
            requested_by=requested_by.id,
        )
        return announcement

    async def update(
        self,
        announcement_id: str,
        patch: AnnouncementPatch,
        principal: Principal,
    ) -> Announcement:
        """Apply a partial update.

        Only fields present in the patch change; ``updated_at`` always
        refreshes. A designer moving the announcement to IN_PROGRESS is
        recorded as ``assigned_to``.

        Args:
            announcement_id: Id of the announcement to update.
            patch: Fields to change.
            principal: The acting principal.

        Returns:
            The updated announcement.

        Raises:
            ValidationError: If a patch value is malformed.
            AnnouncementNotFoundError: If the id is unknown.
            AuthorizationError: If the lifecycle policy refuses the patch.
        """
        _validate_patch(patch)
        log = logger.bind(announcement_id=announcement_id, role=principal.role.value)

        async with self._mutation():
            index, current = self._locate(announcement_id)
            try:
                authorize_patch(principal, current, patch)
            except AuthorizationError:
                log.warning("announcement_update_refused")
                raise

            updated = replace(current, updated_at=self._time.now())
            if patch.status is not None:
                updated = replace(updated, status=patch.status)
                if (
                    patch.status == AnnouncementStatus.IN_PROGRESS
                    and principal.role == UserRole.DESIGNER
                ):
                    updated = replace(updated, assigned_to=principal.id)
            if patch.image_url is not None:
                updated = replace(updated, image_url=patch.image_url)
            if patch.display_duration is not None:
                updated = replace(updated, display_duration=patch.display_duration)

            collection = list(self._announcements)
            collection[index] = updated
            await self._commit(collection)

        log.info(
            "announcement_updated",
            status=updated.status.value,
            assigned_to=updated.assigned_to,
        )
        return updated

    async def delete(self, announcement_id: str) -> None:
        """Hard-delete an announcement, whatever its status.

        Raises:
            AnnouncementNotFoundError: If the id is unknown.
        """
        async with self._mutation():
            index, _ = self._locate(announcement_id)
            collection = list(self._announcements)
            del collection[index]
            await self._commit(collection)

        logger.info("announcement_deleted", announcement_id=announcement_id)

    async def reset(self) -> None:
        """Remove every announcement and the persisted collection."""
        async with self._mutation():
            await self._store.remove(ANNOUNCEMENTS_KEY)
            self._announcements = ()

        logger.warning("announcements_reset")

    def get(self, announcement_id: str) -> Announcement:
        """Get one announcement.

        Raises:
            AnnouncementNotFoundError: If the id is unknown.
        """
        return self._locate(announcement_id)[1]

    def list_all(self) -> tuple[Announcement, ...]:
        """Get the whole collection in insertion order."""
        return self._announcements

    def list_by_status(self, status: AnnouncementStatus) -> tuple[Announcement, ...]:
        """Get announcements with one status, in insertion order."""
        return tuple(a for a in self._announcements if a.status == status)

    def list_published(self) -> tuple[Announcement, ...]:
        """Get the published subset, in insertion order."""
        return self.list_by_status(AnnouncementStatus.PUBLISHED)

    def stats(self) -> DashboardStats:
        """Compute dashboard statistics over the current collection."""
        counts = {status: 0 for status in AnnouncementStatus}
        for announcement in self._announcements:
            counts[announcement.status] += 1
        recent = sorted(
            self._announcements, key=lambda a: a.updated_at, reverse=True
        )[:RECENT_ANNOUNCEMENTS_LIMIT]
        return DashboardStats(
            counts_by_status=counts,
            total=len(self._announcements),
            recent=tuple(recent),
        )

    def _locate(self, announcement_id: str) -> tuple[int, Announcement]:
        for index, announcement in enumerate(self._announcements):
            if announcement.id == announcement_id:
                return index, announcement
        logger.warning("announcement_not_found", announcement_id=announcement_id)
        raise AnnouncementNotFoundError(announcement_id)

    async def _commit(self, collection: Iterable[Announcement]) -> None:
        snapshot = tuple(collection)
        await self._persist(snapshot)
        self._announcements = snapshot

    async def _persist(self, collection: Iterable[Announcement]) -> None:
        payload = json.dumps([a.to_dict() for a in collection])
        await self._store.put(ANNOUNCEMENTS_KEY, payload)

    @asynccontextmanager
    async def _mutation(self) -> AsyncIterator[None]:
        self._in_flight += 1
        try:
            async with self._write_lock:
                if self._latency > 0:
                    await asyncio.sleep(self._latency)
                yield
        finally:
            self._in_flight -= 1
