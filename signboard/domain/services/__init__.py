"""Domain services for Signboard.

Domain services contain business logic that doesn't naturally fit in
entities or value objects. They must NOT depend on infrastructure.

Available services:
- lifecycle_policy: status transitions and field gates by role
"""

from signboard.domain.services.lifecycle_policy import (
    STATUS_HIERARCHY,
    TransitionOptions,
    authorize_patch,
    authorize_status_change,
    available_transitions,
    can_advance,
    can_attach_image,
    can_change_status,
    can_retreat,
    can_set_display_duration,
    next_status,
    prev_status,
)

__all__ = [
    "STATUS_HIERARCHY",
    "TransitionOptions",
    "authorize_patch",
    "authorize_status_change",
    "available_transitions",
    "can_advance",
    "can_attach_image",
    "can_change_status",
    "can_retreat",
    "can_set_display_duration",
    "next_status",
    "prev_status",
]
