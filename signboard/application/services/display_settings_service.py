"""Display settings service.

Loads and saves the DisplaySettings record. When nothing has been saved
yet, the configured defaults apply.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from structlog import get_logger

from signboard.application.ports.persistent_store import DISPLAY_SETTINGS_KEY
from signboard.domain.errors import ValidationError
from signboard.domain.models.display_settings import DisplaySettings

if TYPE_CHECKING:
    from signboard.application.ports.persistent_store import PersistentStoreProtocol

logger = get_logger(__name__)


class DisplaySettingsService:
    """Reads and writes the persisted display settings."""

    def __init__(
        self,
        store: PersistentStoreProtocol,
        defaults: DisplaySettings | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            store: Persistent store holding the settings record.
            defaults: Settings used when nothing has been saved.
        """
        self._store = store
        self._defaults = defaults or DisplaySettings()

    @property
    def defaults(self) -> DisplaySettings:
        """Get the settings used when nothing has been saved."""
        return self._defaults

    async def load(self) -> DisplaySettings:
        """Load the saved settings, falling back to defaults.

        A saved record that no longer validates is ignored in favour of
        the defaults and reported in the log.

        Returns:
            The effective display settings.
        """
        raw = await self._store.get(DISPLAY_SETTINGS_KEY)
        if raw is None:
            return self._defaults
        try:
            return DisplaySettings.from_dict(json.loads(raw), defaults=self._defaults)
        except (TypeError, ValueError) as e:
            logger.warning("display_settings_invalid", error=str(e))
            return self._defaults

    async def save(self, settings: DisplaySettings) -> DisplaySettings:
        """Persist new settings.

        Args:
            settings: The settings to store.

        Returns:
            The stored settings.

        Raises:
            ValidationError: If ``settings`` is not a DisplaySettings record.
        """
        if not isinstance(settings, DisplaySettings):
            raise ValidationError("settings must be a DisplaySettings record")
        await self._store.put(DISPLAY_SETTINGS_KEY, json.dumps(settings.to_dict()))
        logger.info("display_settings_saved", **settings.to_dict())
        return settings
