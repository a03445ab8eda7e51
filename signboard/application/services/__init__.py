"""Application services - Use case orchestration.

Available services:
- AnnouncementRepository: Canonical announcement collection, persisted
- AnnouncementWorkflowService: User actions as the current principal
- DisplayScheduler: Timed rotation of the published subset
- DisplaySettingsService: Persisted carousel/duration/refresh settings
- SessionService: Login, logout and user registration
"""

from signboard.application.services.announcement_repository import (
    AnnouncementRepository,
)
from signboard.application.services.announcement_workflow_service import (
    AnnouncementActions,
    AnnouncementWorkflowService,
)
from signboard.application.services.display_scheduler_service import (
    DisplayScheduler,
    DisplayState,
)
from signboard.application.services.display_settings_service import (
    DisplaySettingsService,
)
from signboard.application.services.session_service import SessionService

__all__ = [
    "AnnouncementActions",
    "AnnouncementRepository",
    "AnnouncementWorkflowService",
    "DisplayScheduler",
    "DisplaySettingsService",
    "DisplayState",
    "SessionService",
]
