"""JSON file implementation of PersistentStoreProtocol.

Keeps every key in one JSON object on disk, the local equivalent of the
browser storage the signage front end used. Each write replaces the file
through a temporary file and an atomic rename, so a crash mid-write never
leaves a half-written store behind.
"""

from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path

from structlog import get_logger

logger = get_logger(__name__)


class JsonFileStore:
    """Durable key-value store backed by a single JSON file.

    The file is read once, lazily, and kept in memory afterwards; every
    put/remove rewrites it. File IO runs in a worker thread so the event
    loop is never blocked.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file. Parent directories are created
                on first write.
        """
        self._path = Path(path)
        self._data: dict[str, str] | None = None
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        """Get the backing file location."""
        return self._path

    async def get(self, key: str) -> str | None:
        """Read the value stored under a key."""
        async with self._lock:
            data = await self._ensure_loaded()
            return data.get(key)

    async def put(self, key: str, value: str) -> None:
        """Replace the value stored under a key and flush to disk."""
        async with self._lock:
            data = dict(await self._ensure_loaded())
            data[key] = value
            await asyncio.to_thread(self._write, data)
            self._data = data

    async def remove(self, key: str) -> None:
        """Remove a key and flush to disk."""
        async with self._lock:
            data = dict(await self._ensure_loaded())
            if data.pop(key, None) is None:
                return
            await asyncio.to_thread(self._write, data)
            self._data = data

    async def _ensure_loaded(self) -> dict[str, str]:
        if self._data is None:
            self._data = await asyncio.to_thread(self._read)
        return self._data

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            logger.info("json_store_created", path=str(self._path))
            return {}
        with self._path.open(encoding="utf-8") as handle:
            content = json.load(handle)
        if not isinstance(content, dict):
            raise ValueError(f"Store file {self._path} does not hold a JSON object")
        logger.info("json_store_opened", path=str(self._path), keys=len(content))
        return {str(key): str(value) for key, value in content.items()}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
