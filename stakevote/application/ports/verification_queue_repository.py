"""Verification queue repository port.

Stores one QueueEntry per content identifier. Entries are replaced
wholesale on every change and never deleted.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stakevote.domain.models.queue_entry import QueueEntry


class VerificationQueueRepositoryProtocol(Protocol):
    """Repository protocol for queue entries."""

    @abstractmethod
    async def get(self, content_id: str) -> QueueEntry | None:
        """Get the entry for a content identifier, or None."""
        ...

    @abstractmethod
    async def add(self, entry: QueueEntry) -> None:
        """Store a new entry.

        Raises:
            AlreadyQueuedError: If an entry already exists for the content.
        """
        ...

    @abstractmethod
    async def save(self, entry: QueueEntry) -> None:
        """Replace an existing entry.

        Raises:
            NotRegisteredError: If no entry exists for the content.
        """
        ...
