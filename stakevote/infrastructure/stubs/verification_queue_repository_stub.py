"""In-memory stub for VerificationQueueRepositoryProtocol.

Thread-safety note: This stub is NOT thread-safe. The verification
services serialize writes per content identifier before calling it.
"""

from __future__ import annotations

from stakevote.domain.errors import AlreadyQueuedError, NotRegisteredError
from stakevote.domain.models.queue_entry import QueueEntry, QueueStatus


class VerificationQueueRepositoryStub:
    """In-memory implementation of VerificationQueueRepositoryProtocol.

    Entries are stored in a dictionary keyed by content identifier and
    are never removed.
    """

    def __init__(self) -> None:
        """Initialize empty stub."""
        self._entries: dict[str, QueueEntry] = {}

    async def get(self, content_id: str) -> QueueEntry | None:
        return self._entries.get(content_id)

    async def add(self, entry: QueueEntry) -> None:
        """Store a new entry.

        Raises:
            AlreadyQueuedError: If the content is already queued.
        """
        if entry.content_id in self._entries:
            raise AlreadyQueuedError(entry.content_id)
        self._entries[entry.content_id] = entry

    async def save(self, entry: QueueEntry) -> None:
        """Replace an existing entry.

        Raises:
            NotRegisteredError: If the content was never queued.
        """
        if entry.content_id not in self._entries:
            raise NotRegisteredError(entry.content_id, "content is not queued")
        self._entries[entry.content_id] = entry

    def count_by_status(self, status: QueueStatus) -> int:
        """Count entries currently in ``status`` (test helper)."""
        return sum(1 for entry in self._entries.values() if entry.status == status)

    def __len__(self) -> int:
        return len(self._entries)
