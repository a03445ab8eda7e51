"""Identity registry port.

The fixed registry of accounts that credentials are checked against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from signboard.domain.models.principal import Principal


@dataclass(frozen=True)
class RegisteredAccount:
    """An account known to the registry.

    Attributes:
        principal: The identity issued on successful login.
        password_hash: bcrypt hash of the account password, salt included.
    """

    principal: Principal
    password_hash: str


class IdentityRegistryProtocol(Protocol):
    """Protocol for looking up and adding accounts."""

    async def find_by_email(self, email: str) -> RegisteredAccount | None:
        """Find an account by login email (case-insensitive).

        Returns:
            The account, or None if no account uses that email.
        """
        ...

    async def add(self, account: RegisteredAccount) -> None:
        """Add an account to the registry.

        Raises:
            ValueError: If an account with the same email exists.
        """
        ...
