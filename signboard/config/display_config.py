"""Display defaults configuration.

The display settings record is persisted and editable at runtime; this
module only supplies the defaults used when nothing has been saved yet.

Environment Variables:
- DISPLAY_CAROUSEL_SPEED: Transition seconds (default: 5, min: 1, max: 10)
- DISPLAY_DEFAULT_DURATION: Seconds per slide without its own duration
  (default: 10, min: 1, max: 300)
- DISPLAY_REFRESH_RATE_SECONDS: Reload interval for published content
  (default: 60, min: 1, max: 3600)
"""

from __future__ import annotations

from dataclasses import dataclass

from signboard.config._env import get_int_env
from signboard.domain.models.display_settings import DisplaySettings

DEFAULT_CAROUSEL_SPEED = 5
MIN_CAROUSEL_SPEED = 1
MAX_CAROUSEL_SPEED = 10

DEFAULT_DISPLAY_DURATION = 10
MIN_DISPLAY_DURATION = 1
MAX_DISPLAY_DURATION = 300

DEFAULT_REFRESH_RATE_SECONDS = 60
MIN_REFRESH_RATE_SECONDS = 1
MAX_REFRESH_RATE_SECONDS = 3600


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class DisplayConfig:
    """Defaults for the display settings record.

    Attributes:
        carousel_speed: Transition seconds between slides.
        default_duration: Seconds per slide without its own duration.
        refresh_rate_seconds: Reload interval for published content.
    """

    carousel_speed: int = DEFAULT_CAROUSEL_SPEED
    default_duration: int = DEFAULT_DISPLAY_DURATION
    refresh_rate_seconds: int = DEFAULT_REFRESH_RATE_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        bounds = {
            "carousel_speed": (MIN_CAROUSEL_SPEED, MAX_CAROUSEL_SPEED),
            "default_duration": (MIN_DISPLAY_DURATION, MAX_DISPLAY_DURATION),
            "refresh_rate_seconds": (MIN_REFRESH_RATE_SECONDS, MAX_REFRESH_RATE_SECONDS),
        }
        for name, (low, high) in bounds.items():
            value = getattr(self, name)
            if not low <= value <= high:
                raise ValueError(
                    f"{name} must be between {low} and {high}, got {value}"
                )

    def to_settings(self) -> DisplaySettings:
        """Build the default DisplaySettings record."""
        return DisplaySettings(
            carousel_speed=self.carousel_speed,
            default_duration=self.default_duration,
            refresh_rate_seconds=self.refresh_rate_seconds,
        )

    @classmethod
    def from_environment(cls) -> DisplayConfig:
        """Create config from environment variables, clamped to range."""
        return cls(
            carousel_speed=_clamp(
                get_int_env("DISPLAY_CAROUSEL_SPEED", DEFAULT_CAROUSEL_SPEED),
                MIN_CAROUSEL_SPEED,
                MAX_CAROUSEL_SPEED,
            ),
            default_duration=_clamp(
                get_int_env("DISPLAY_DEFAULT_DURATION", DEFAULT_DISPLAY_DURATION),
                MIN_DISPLAY_DURATION,
                MAX_DISPLAY_DURATION,
            ),
            refresh_rate_seconds=_clamp(
                get_int_env(
                    "DISPLAY_REFRESH_RATE_SECONDS", DEFAULT_REFRESH_RATE_SECONDS
                ),
                MIN_REFRESH_RATE_SECONDS,
                MAX_REFRESH_RATE_SECONDS,
            ),
        )


# Default production config
DEFAULT_DISPLAY_CONFIG = DisplayConfig()
