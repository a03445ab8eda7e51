"""Bootstrap wiring for the signage application.

Builds every service once and returns them in a container. Callers hold
the container; nothing here is kept in module globals.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from structlog import get_logger

from signboard.application.ports.persistent_store import PersistentStoreProtocol
from signboard.application.services.announcement_repository import (
    AnnouncementRepository,
)
from signboard.application.services.announcement_workflow_service import (
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
from signboard.bootstrap.logging import configure_structlog
from signboard.config.display_config import DisplayConfig
from signboard.config.workflow_config import WorkflowConfig
from signboard.infrastructure.adapters.persistence import JsonFileStore
from signboard.infrastructure.adapters.time import SystemTimeAuthority
from signboard.infrastructure.seed import demo_announcements
from signboard.infrastructure.stubs import IdentityRegistryStub, PersistentStoreStub

logger = get_logger(__name__)


@dataclass
class SignageContainer:
    """The wired services of one signage application."""

    config: WorkflowConfig
    store: PersistentStoreProtocol
    time_authority: SystemTimeAuthority
    repository: AnnouncementRepository
    sessions: SessionService
    settings: DisplaySettingsService
    workflow: AnnouncementWorkflowService

    def new_display(
        self,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_change: Callable[[DisplayState], None] | None = None,
    ) -> DisplayScheduler:
        """Create a display scheduler over this container's repository.

        Each screen gets its own scheduler; call activate() on it when the
        screen opens and deactivate() when it closes.
        """
        return DisplayScheduler(
            repository=self.repository,
            settings_service=self.settings,
            workflow=self.workflow,
            sleep=sleep,
            on_change=on_change,
        )

    async def start(self) -> None:
        """Load the persisted state: announcements and session."""
        seed = (
            demo_announcements(self.time_authority.now())
            if self.config.seed_demo_data
            else None
        )
        await self.repository.load(seed)
        await self.sessions.restore()
        logger.info(
            "signage_started",
            announcements=len(self.repository.list_all()),
            store=type(self.store).__name__,
        )


def build_signage(
    config: WorkflowConfig | None = None,
    display_config: DisplayConfig | None = None,
) -> SignageContainer:
    """Wire the signage services.

    Configuration not passed in is read from the environment, after
    loading a ``.env`` file if one exists. Logging is configured first,
    unless the workflow config turns that off.

    Args:
        config: Workflow configuration.
        display_config: Defaults for the display settings.

    Returns:
        A container whose start() must be awaited before use.
    """
    load_dotenv()
    config = config or WorkflowConfig.from_environment()
    display_config = display_config or DisplayConfig.from_environment()
    if config.configure_logging:
        configure_structlog(config.environment)

    store: PersistentStoreProtocol
    if config.store_path:
        store = JsonFileStore(Path(config.store_path))
    else:
        store = PersistentStoreStub()

    time_authority = SystemTimeAuthority()
    repository = AnnouncementRepository(
        store=store, time_authority=time_authority, config=config
    )
    sessions = SessionService(
        registry=IdentityRegistryStub(), store=store, config=config
    )
    settings = DisplaySettingsService(store=store, defaults=display_config.to_settings())
    workflow = AnnouncementWorkflowService(repository=repository, identity=sessions)

    logger.info(
        "signage_built",
        store_path=config.store_path,
        simulated_latency_seconds=config.simulated_latency_seconds,
    )
    return SignageContainer(
        config=config,
        store=store,
        time_authority=time_authority,
        repository=repository,
        sessions=sessions,
        settings=settings,
        workflow=workflow,
    )
