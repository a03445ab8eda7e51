"""Identity provider port.

What the rest of the application needs from the session: check
credentials, and tell who is signed in. The lifecycle policy only ever
consumes ``current_principal().role``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from signboard.domain.models.principal import Principal


class IdentityProviderProtocol(Protocol):
    """Protocol for the session / identity provider."""

    async def authenticate(self, email: str, password: str) -> Principal:
        """Authenticate credentials and open a session.

        Raises:
            AuthenticationError: If the credentials are invalid.
        """
        ...

    def current_principal(self) -> Principal | None:
        """Get the signed-in principal, or None without a session."""
        ...
