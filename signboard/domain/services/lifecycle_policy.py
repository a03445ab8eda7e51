"""Announcement lifecycle policy domain service.

Pure decision logic for who may move an announcement's status, and in
which direction. Nothing here mutates state; callers ask, then act.

Two layers are applied together:

Direction table (which single step is permitted):
    ADMIN:    forward whenever a next status exists,
              backward whenever a previous status exists
    DESIGNER: forward from PENDING or IN_PROGRESS, never backward
    DIRECTOR: forward from AWAITING_APPROVAL (the approval gate),
              never backward

Field gates (whether the control is offered at all):
    status change: ADMIN; DESIGNER unless PUBLISHED;
                   DIRECTOR only at AWAITING_APPROVAL
    image attach:  DESIGNER or ADMIN
    duration set:  DESIGNER or ADMIN, with an image attached and the
                   status at AWAITING_APPROVAL or PUBLISHED

Moving past PUBLISHED or before PENDING is simply unavailable (there is
no next/previous status); it is not an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from signboard.domain.errors.identity import AuthorizationError
from signboard.domain.models.announcement import (
    Announcement,
    AnnouncementPatch,
    AnnouncementStatus,
)
from signboard.domain.models.principal import UserRole

if TYPE_CHECKING:
    from signboard.domain.models.principal import Principal

STATUS_HIERARCHY: tuple[AnnouncementStatus, ...] = (
    AnnouncementStatus.PENDING,
    AnnouncementStatus.IN_PROGRESS,
    AnnouncementStatus.AWAITING_APPROVAL,
    AnnouncementStatus.PUBLISHED,
)

DESIGNER_FORWARD_FROM: frozenset[AnnouncementStatus] = frozenset(
    {AnnouncementStatus.PENDING, AnnouncementStatus.IN_PROGRESS}
)

DURATION_EDITABLE_STATUSES: frozenset[AnnouncementStatus] = frozenset(
    {AnnouncementStatus.AWAITING_APPROVAL, AnnouncementStatus.PUBLISHED}
)


@dataclass(frozen=True)
class TransitionOptions:
    """Status moves available to a role for one announcement.

    This is what drives the "advance" and "retreat" controls.

    Attributes:
        next_status: Status one step forward, None at PUBLISHED.
        previous_status: Status one step back, None at PENDING.
        can_advance: Whether the forward move is permitted.
        can_retreat: Whether the backward move is permitted.
    """

    next_status: AnnouncementStatus | None
    previous_status: AnnouncementStatus | None
    can_advance: bool
    can_retreat: bool


def next_status(status: AnnouncementStatus) -> AnnouncementStatus | None:
    """Get the status one step forward, or None at the end."""
    index = STATUS_HIERARCHY.index(status)
    if index < len(STATUS_HIERARCHY) - 1:
        return STATUS_HIERARCHY[index + 1]
    return None


def prev_status(status: AnnouncementStatus) -> AnnouncementStatus | None:
    """Get the status one step back, or None at the start."""
    index = STATUS_HIERARCHY.index(status)
    if index > 0:
        return STATUS_HIERARCHY[index - 1]
    return None


def can_advance(role: UserRole, status: AnnouncementStatus) -> bool:
    """Check the direction table for a forward move.

    Args:
        role: Role of the acting principal.
        status: Current status of the announcement.

    Returns:
        True if the role may move the status one step forward.
        Always False at PUBLISHED.
    """
    if next_status(status) is None:
        return False
    if role == UserRole.ADMIN:
        return True
    if role == UserRole.DESIGNER:
        return status in DESIGNER_FORWARD_FROM
    if role == UserRole.DIRECTOR:
        return status == AnnouncementStatus.AWAITING_APPROVAL
    return False


def can_retreat(role: UserRole, status: AnnouncementStatus) -> bool:
    """Check the direction table for a backward move.

    Only the unrestricted role may ever retract a status.
    """
    if prev_status(status) is None:
        return False
    return role == UserRole.ADMIN


def can_change_status(role: UserRole, status: AnnouncementStatus) -> bool:
    """Field gate: is the status control offered at all?"""
    if role == UserRole.ADMIN:
        return True
    if role == UserRole.DESIGNER:
        return status != AnnouncementStatus.PUBLISHED
    if role == UserRole.DIRECTOR:
        return status == AnnouncementStatus.AWAITING_APPROVAL
    return False


def can_attach_image(role: UserRole) -> bool:
    """Field gate: may the role attach artwork?"""
    return role in (UserRole.DESIGNER, UserRole.ADMIN)


def can_set_display_duration(role: UserRole, announcement: Announcement) -> bool:
    """Field gate: may the role set the display duration?

    Requires artwork already attached and the announcement to be at
    least awaiting approval.
    """
    return (
        role in (UserRole.DESIGNER, UserRole.ADMIN)
        and announcement.has_image
        and announcement.status in DURATION_EDITABLE_STATUSES
    )


def available_transitions(
    role: UserRole, announcement: Announcement
) -> TransitionOptions:
    """Compute the status moves offered to a role.

    Both layers are applied: a move is only available when the field
    gate passes, the direction table permits it, and the target exists.

    Args:
        role: Role of the acting principal.
        announcement: The announcement being viewed.

    Returns:
        TransitionOptions for the advance/retreat controls.
    """
    status = announcement.status
    gate = can_change_status(role, status)
    return TransitionOptions(
        next_status=next_status(status),
        previous_status=prev_status(status),
        can_advance=gate and can_advance(role, status),
        can_retreat=gate and can_retreat(role, status),
    )


def authorize_status_change(
    role: UserRole,
    announcement: Announcement,
    target: AnnouncementStatus,
) -> None:
    """Refuse any status change the policy does not permit.

    A target equal to the current status is not a transition and only
    needs the field gate. Any other target must be exactly the permitted
    next status, or (for ADMIN) the previous one; jumps are refused.

    Args:
        role: Role of the acting principal.
        announcement: The announcement in its current state.
        target: Requested status.

    Raises:
        AuthorizationError: If the change is not permitted.
    """
    current = announcement.status
    if not can_change_status(role, current):
        raise AuthorizationError(
            f"Role {role.value} may not change status of an announcement "
            f"that is {current.value}",
            role=role.value,
            action="change_status",
        )

    if target == current:
        return

    options = available_transitions(role, announcement)
    if target == options.next_status and options.can_advance:
        return
    if target == options.previous_status and options.can_retreat:
        return

    raise AuthorizationError(
        f"Role {role.value} may not move status from {current.value} "
        f"to {target.value}",
        role=role.value,
        action="change_status",
    )


def authorize_patch(
    principal: Principal,
    announcement: Announcement,
    patch: AnnouncementPatch,
) -> None:
    """Check every field of a patch against the policy.

    Gates are evaluated against the announcement as it is now, before any
    part of the patch is applied.

    Args:
        principal: The acting principal.
        announcement: The announcement in its current state.
        patch: The requested changes.

    Raises:
        AuthorizationError: On the first field the principal may not touch.
    """
    role = principal.role

    if patch.status is not None:
        authorize_status_change(role, announcement, patch.status)

    if patch.image_url is not None and not can_attach_image(role):
        raise AuthorizationError(
            f"Role {role.value} may not attach artwork",
            role=role.value,
            action="attach_image",
        )

    if patch.display_duration is not None and not can_set_display_duration(
        role, announcement
    ):
        raise AuthorizationError(
            f"Role {role.value} may not set the display duration of an "
            f"announcement that is {announcement.status.value}"
            + ("" if announcement.has_image else " without artwork"),
            role=role.value,
            action="set_display_duration",
        )
