"""Announcement workflow service.

The actions a signed-in user can take on announcements, acting as the
current principal. Every action resolves the principal from the identity
provider and hands the change to the repository, which consults the
lifecycle policy before mutating anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from structlog import get_logger

from signboard.domain.errors import AuthenticationError, AuthorizationError
from signboard.domain.models.announcement import AnnouncementPatch
from signboard.domain.services.lifecycle_policy import (
    available_transitions,
    can_attach_image,
    can_change_status,
    can_set_display_duration,
)

if TYPE_CHECKING:
    from signboard.application.ports.identity_provider import (
        IdentityProviderProtocol,
    )
    from signboard.application.services.announcement_repository import (
        AnnouncementRepository,
    )
    from signboard.domain.models.announcement import (
        Announcement,
        AnnouncementStatus,
    )
    from signboard.domain.models.principal import Principal

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnnouncementActions:
    """Controls offered to the current principal on one announcement.

    Attributes:
        announcement_id: The announcement the actions apply to.
        next_status: Target of the advance control, None at the end.
        previous_status: Target of the retreat control, None at the start.
        can_advance: Advance control enabled.
        can_retreat: Retreat control enabled.
        can_change_status: Status control shown at all.
        can_attach_image: Artwork upload shown.
        can_set_display_duration: Duration field shown.
    """

    announcement_id: str
    next_status: AnnouncementStatus | None
    previous_status: AnnouncementStatus | None
    can_advance: bool
    can_retreat: bool
    can_change_status: bool
    can_attach_image: bool
    can_set_display_duration: bool


class AnnouncementWorkflowService:
    """User-facing announcement actions for the current principal."""

    def __init__(
        self,
        repository: AnnouncementRepository,
        identity: IdentityProviderProtocol,
    ) -> None:
        self._repository = repository
        self._identity = identity

    def _principal(self) -> Principal:
        principal = self._identity.current_principal()
        if principal is None:
            raise AuthenticationError("You must be logged in")
        return principal

    async def request_announcement(
        self,
        title: str,
        description: str,
        briefing_pdf_name: str | None = None,
    ) -> Announcement:
        """Submit a new announcement request as the current principal.

        Raises:
            AuthenticationError: If nobody is signed in.
            ValidationError: If title or description is blank.
        """
        principal = self._principal()
        return await self._repository.create(
            title,
            description,
            principal,
            briefing_pdf_name=briefing_pdf_name,
        )

    async def change_status(
        self, announcement_id: str, status: AnnouncementStatus
    ) -> Announcement:
        """Set the status of an announcement.

        Raises:
            AuthenticationError: If nobody is signed in.
            AnnouncementNotFoundError: If the id is unknown.
            AuthorizationError: If the policy refuses the move.
        """
        principal = self._principal()
        return await self._repository.update(
            announcement_id, AnnouncementPatch(status=status), principal
        )

    async def advance(self, announcement_id: str) -> Announcement:
        """Move an announcement one step forward.

        At PUBLISHED there is nowhere to go and the announcement comes back
        unchanged.

        Raises:
            AuthorizationError: If the role may not advance from here.
        """
        principal = self._principal()
        current = self._repository.get(announcement_id)
        options = available_transitions(principal.role, current)
        if options.next_status is None:
            return current
        if not options.can_advance:
            logger.warning(
                "advance_refused",
                announcement_id=announcement_id,
                role=principal.role.value,
                status=current.status.value,
            )
            raise AuthorizationError(
                f"Role {principal.role.value} may not advance an announcement "
                f"that is {current.status.value}",
                role=principal.role.value,
                action="advance",
            )
        return await self.change_status(announcement_id, options.next_status)

    async def retreat(self, announcement_id: str) -> Announcement:
        """Move an announcement one step back.

        Artwork, duration and assignee are kept. At PENDING the
        announcement comes back unchanged.

        Raises:
            AuthorizationError: If the role may not retreat.
        """
        principal = self._principal()
        current = self._repository.get(announcement_id)
        options = available_transitions(principal.role, current)
        if options.previous_status is None:
            return current
        if not options.can_retreat:
            logger.warning(
                "retreat_refused",
                announcement_id=announcement_id,
                role=principal.role.value,
                status=current.status.value,
            )
            raise AuthorizationError(
                f"Role {principal.role.value} may not retreat an announcement",
                role=principal.role.value,
                action="retreat",
            )
        return await self.change_status(announcement_id, options.previous_status)

    async def attach_image(self, announcement_id: str, image_url: str) -> Announcement:
        """Attach artwork to an announcement."""
        principal = self._principal()
        return await self._repository.update(
            announcement_id, AnnouncementPatch(image_url=image_url), principal
        )

    async def set_display_duration(
        self, announcement_id: str, seconds: int
    ) -> Announcement:
        """Set how many seconds the announcement stays on screen."""
        principal = self._principal()
        return await self._repository.update(
            announcement_id, AnnouncementPatch(display_duration=seconds), principal
        )

    async def delete(self, announcement_id: str) -> None:
        """Delete an announcement as the current principal.

        Any signed-in role may delete, matching the display screen's
        delete control.
        """
        principal = self._principal()
        await self._repository.delete(announcement_id)
        logger.info(
            "announcement_deleted_by",
            announcement_id=announcement_id,
            principal_id=principal.id,
        )

    def available_actions(self, announcement_id: str) -> AnnouncementActions:
        """Describe the controls the current principal gets for an announcement."""
        principal = self._principal()
        announcement = self._repository.get(announcement_id)
        role = principal.role
        options = available_transitions(role, announcement)
        return AnnouncementActions(
            announcement_id=announcement.id,
            next_status=options.next_status,
            previous_status=options.previous_status,
            can_advance=options.can_advance,
            can_retreat=options.can_retreat,
            can_change_status=can_change_status(role, announcement.status),
            can_attach_image=can_attach_image(role),
            can_set_display_duration=can_set_display_duration(role, announcement),
        )
