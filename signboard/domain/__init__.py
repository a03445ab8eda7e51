"""
Domain layer - Pure business logic for Signboard.

This layer contains:
- Domain models (Announcement, Principal, DisplaySettings)
- Domain services (lifecycle policy)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure,
bootstrap or config. Only stdlib and typing imports are allowed.
"""

from signboard.domain.exceptions import SignboardError

__all__: list[str] = ["SignboardError"]
