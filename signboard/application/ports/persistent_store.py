"""Persistent store port.

This module defines the protocol for the durable key-value store behind
the announcement collection, the display settings and the session.

Values are whole serialized collections. Writers always replace the full
value for a key; there is no partial update and no schema versioning.

Keys in use:
    announcements: JSON list of announcements
    displaySettings: JSON object of display settings
    user: JSON object of the signed-in principal
"""

from __future__ import annotations

from typing import Protocol

ANNOUNCEMENTS_KEY = "announcements"
DISPLAY_SETTINGS_KEY = "displaySettings"
SESSION_KEY = "user"


class PersistentStoreProtocol(Protocol):
    """Protocol for a durable string key-value store.

    Implementers MUST:
    1. Return exactly the last value put for a key
    2. Replace values atomically (a reader never sees half a write)
    3. Return None for keys that were never written or were removed
    """

    async def get(self, key: str) -> str | None:
        """Read the serialized value stored under a key.

        Args:
            key: Store key.

        Returns:
            The stored value, or None if the key is absent.
        """
        ...

    async def put(self, key: str, value: str) -> None:
        """Replace the value stored under a key.

        Args:
            key: Store key.
            value: Serialized collection.
        """
        ...

    async def remove(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        ...
