"""Persistent store stub.

In-memory implementation of PersistentStoreProtocol with:
1. Whole-value replacement per key
2. Configurable failure modes
3. Call counters for test assertions
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FailureMode:
    """Configuration for simulating store failures."""

    write_fails: bool = False
    read_fails: bool = False


class PersistentStoreStub:
    """In-memory implementation of PersistentStoreProtocol.

    Usage:
        stub = PersistentStoreStub()
        await stub.put("announcements", "[]")
        assert await stub.get("announcements") == "[]"

        # Simulate an unwritable store
        stub.set_failure_mode(FailureMode(write_fails=True))
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Initialize stub, optionally pre-populated.

        Args:
            initial: Key/value pairs present before the first call.
        """
        self._data: dict[str, str] = dict(initial or {})
        self._failure_mode = FailureMode()
        self._put_count = 0

    def set_failure_mode(self, mode: FailureMode) -> None:
        """Configure failure simulation for testing."""
        self._failure_mode = mode

    def clear(self) -> None:
        """Clear all state for test isolation."""
        self._data.clear()
        self._failure_mode = FailureMode()
        self._put_count = 0

    @property
    def put_count(self) -> int:
        """Get the number of successful put() calls."""
        return self._put_count

    @property
    def data(self) -> dict[str, str]:
        """Get a copy of the stored values (for test assertions)."""
        return dict(self._data)

    async def get(self, key: str) -> str | None:
        """Read the value stored under a key.

        Raises:
            RuntimeError: If reads are configured to fail.
        """
        if self._failure_mode.read_fails:
            raise RuntimeError(f"Simulated read failure for key {key}")
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        """Replace the value stored under a key.

        Raises:
            RuntimeError: If writes are configured to fail.
        """
        if self._failure_mode.write_fails:
            raise RuntimeError(f"Simulated write failure for key {key}")
        self._data[key] = value
        self._put_count += 1

    async def remove(self, key: str) -> None:
        """Remove a key; absent keys are ignored.

        Raises:
            RuntimeError: If writes are configured to fail.
        """
        if self._failure_mode.write_fails:
            raise RuntimeError(f"Simulated write failure for key {key}")
        self._data.pop(key, None)
