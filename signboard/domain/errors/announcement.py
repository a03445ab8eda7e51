"""Announcement domain errors.

Validation and lookup failures raised by the announcement repository.
Both are logical errors: callers report them, nothing is retried and no
state is changed.
"""

from __future__ import annotations

from signboard.domain.exceptions import SignboardError


class ValidationError(SignboardError):
    """Raised when input to create/update is malformed.

    Attributes:
        field: Name of the offending field, when known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description of the problem.
            field: Name of the offending field, when known.
        """
        self.field = field
        super().__init__(message)


class NotFoundError(SignboardError):
    """Raised when an operation references an unknown entity."""

    pass


class AnnouncementNotFoundError(NotFoundError):
    """Raised when an announcement id is not in the collection.

    Attributes:
        announcement_id: The id that was looked up.
    """

    def __init__(self, announcement_id: str) -> None:
        """Initialize the error.

        Args:
            announcement_id: The id that was looked up.
        """
        self.announcement_id = announcement_id
        super().__init__(f"Announcement {announcement_id} not found")
