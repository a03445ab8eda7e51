"""Domain errors for Signboard.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from SignboardError.
"""

from signboard.domain.errors.announcement import (
    AnnouncementNotFoundError,
    NotFoundError,
    ValidationError,
)
from signboard.domain.errors.identity import AuthenticationError, AuthorizationError

__all__: list[str] = [
    "AnnouncementNotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
]
