"""Principal domain model.

A principal is an authenticated actor. It is issued by the session
service on login and never changes for the life of the session.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class UserRole(Enum):
    """Role of a principal.

    Roles:
        ADMIN: Unrestricted; may move a status one step in either direction
        DIRECTOR: Requests announcements and approves them for publishing
        DESIGNER: Produces artwork and pushes work through production
    """

    ADMIN = "admin"
    DIRECTOR = "director"
    DESIGNER = "designer"


@dataclass(frozen=True, eq=True)
class Principal:
    """An authenticated actor.

    Attributes:
        id: Stable identifier, referenced by announcements.
        email: Login email.
        name: Display name.
        role: Role granted by the identity registry.
    """

    id: str
    email: str
    name: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        """Check if the principal holds the unrestricted role."""
        return self.role == UserRole.ADMIN

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the persisted session entry."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Principal:
        """Deserialize a persisted session entry.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If the role is unknown.
        """
        return cls(
            id=str(data["id"]),
            email=data["email"],
            name=data["name"],
            role=UserRole(data["role"]),
        )
