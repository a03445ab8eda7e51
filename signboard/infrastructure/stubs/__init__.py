"""In-memory stubs implementing application ports.

Used by the default wiring when no durable store is configured, and by
unit and integration tests.
"""

from signboard.infrastructure.stubs.identity_registry_stub import (
    DEMO_ACCOUNTS,
    IdentityRegistryStub,
)
from signboard.infrastructure.stubs.persistent_store_stub import (
    FailureMode,
    PersistentStoreStub,
)

__all__ = [
    "DEMO_ACCOUNTS",
    "FailureMode",
    "IdentityRegistryStub",
    "PersistentStoreStub",
]
