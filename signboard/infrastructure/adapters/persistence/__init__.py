"""Persistent store adapters."""

from signboard.infrastructure.adapters.persistence.json_file_store import (
    JsonFileStore,
)

__all__ = ["JsonFileStore"]
