"""Unit tests for JsonFileStore."""

import json
from pathlib import Path

import pytest

from signboard.infrastructure.adapters.persistence import JsonFileStore


class TestJsonFileStore:
    """Tests for the file-backed persistent store."""

    async def test_missing_file_reads_as_empty(self, tmp_path: Path) -> None:
        store = JsonFileStore(tmp_path / "store.json")
        assert await store.get("announcements") is None

    async def test_put_writes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "store.json"
        store = JsonFileStore(path)

        await store.put("user", '{"id": "1"}')

        assert json.loads(path.read_text(encoding="utf-8")) == {"user": '{"id": "1"}'}
        assert list(path.parent.glob("*.tmp")) == []

    async def test_values_survive_reopen(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        await JsonFileStore(path).put("displaySettings", '{"refreshRate": 30}')

        reopened = JsonFileStore(path)

        assert await reopened.get("displaySettings") == '{"refreshRate": 30}'

    async def test_remove(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        store = JsonFileStore(path)
        await store.put("user", "x")
        await store.put("announcements", "[]")

        await store.remove("user")
        await store.remove("never-set")

        assert await store.get("user") is None
        assert json.loads(path.read_text(encoding="utf-8")) == {"announcements": "[]"}

    async def test_non_object_file_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError):
            await JsonFileStore(path).get("user")
