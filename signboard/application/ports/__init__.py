"""Application ports (abstract interfaces) for Signboard."""

from signboard.application.ports.identity_provider import IdentityProviderProtocol
from signboard.application.ports.identity_registry import (
    IdentityRegistryProtocol,
    RegisteredAccount,
)
from signboard.application.ports.persistent_store import (
    ANNOUNCEMENTS_KEY,
    DISPLAY_SETTINGS_KEY,
    SESSION_KEY,
    PersistentStoreProtocol,
)
from signboard.application.ports.time_authority import TimeAuthorityProtocol

__all__ = [
    "ANNOUNCEMENTS_KEY",
    "DISPLAY_SETTINGS_KEY",
    "SESSION_KEY",
    "IdentityProviderProtocol",
    "IdentityRegistryProtocol",
    "PersistentStoreProtocol",
    "RegisteredAccount",
    "TimeAuthorityProtocol",
]
