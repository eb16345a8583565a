"""Per-content critical sections.

Every mutating verification operation runs while holding the lock of the
content it targets, so two operations on the same content never
interleave across await points. Operations on different content proceed
concurrently.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ContentLockRegistry:
    """asyncio.Lock per content identifier, alive only while in use.

    A lock is created when the first task asks to hold it and dropped once
    its last holder or waiter leaves, so the registry never retains locks
    for content that no operation is currently touching.

    Locks are not reentrant: a service holding a content's lock must not
    call another locked operation on the same content.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, content_id: str) -> AsyncIterator[None]:
        """Hold the content's lock for the duration of the block."""
        lock = self._locks.get(content_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[content_id] = lock
        self._users[content_id] = self._users.get(content_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            remaining = self._users[content_id] - 1
            if remaining:
                self._users[content_id] = remaining
            else:
                del self._users[content_id]
                del self._locks[content_id]

    def is_locked(self, content_id: str) -> bool:
        lock = self._locks.get(content_id)
        return lock is not None and lock.locked()

    def users(self, content_id: str) -> int:
        """Number of tasks holding or waiting for the content's lock."""
        return self._users.get(content_id, 0)
