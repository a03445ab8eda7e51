"""Identity and permission errors.

AuthenticationError covers "who are you" failures (bad credentials, no
session). AuthorizationError covers "you may not do that" failures raised
by the lifecycle policy and by admin-only operations.
"""

from __future__ import annotations

from signboard.domain.exceptions import SignboardError


class AuthenticationError(SignboardError):
    """Raised when credentials are invalid or no principal is signed in."""

    pass


class AuthorizationError(SignboardError):
    """Raised when a principal lacks permission for an action.

    Attributes:
        role: Role value of the refused principal, when known.
        action: Short name of the refused action.
    """

    def __init__(
        self,
        message: str,
        *,
        role: str | None = None,
        action: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Human-readable reason for the refusal.
            role: Role value of the refused principal, when known.
            action: Short name of the refused action.
        """
        self.role = role
        self.action = action
        super().__init__(message)
