"""Display settings domain model.

Flat configuration record read by the display scheduler every time it
loads. Persisted independently of the announcement collection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DisplaySettings:
    """Settings that drive the public display.

    Attributes:
        carousel_speed: Seconds spent on the transition between slides.
        default_duration: Seconds an announcement stays on screen when it
            has no display_duration of its own.
        refresh_rate_seconds: Interval between reloads of the published
            announcements.
    """

    carousel_speed: int = 5
    default_duration: int = 10
    refresh_rate_seconds: int = 60

    def __post_init__(self) -> None:
        """Validate that every setting is a positive integer."""
        for name in ("carousel_speed", "default_duration", "refresh_rate_seconds"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be an integer >= 1, got {value!r}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted layout."""
        return {
            "carouselSpeed": self.carousel_speed,
            "defaultDuration": self.default_duration,
            "refreshRate": self.refresh_rate_seconds,
        }

    @classmethod
    def from_dict(
        cls, data: Any, defaults: DisplaySettings | None = None
    ) -> DisplaySettings:
        """Deserialize from the persisted layout.

        Missing keys fall back to ``defaults``.

        Args:
            data: Persisted dictionary.
            defaults: Settings used for absent keys.

        Returns:
            DisplaySettings instance.

        Raises:
            ValueError: If ``data`` is not an object or a value is not a
                positive integer.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"display settings must be an object, got {type(data).__name__}"
            )
        base = defaults or cls()
        return cls(
            carousel_speed=data.get("carouselSpeed", base.carousel_speed),
            default_duration=data.get("defaultDuration", base.default_duration),
            refresh_rate_seconds=data.get("refreshRate", base.refresh_rate_seconds),
        )
