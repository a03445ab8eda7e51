"""Time authority adapters."""

from signboard.infrastructure.adapters.time.system_time_authority import (
    SystemTimeAuthority,
)

__all__ = ["SystemTimeAuthority"]
