"""Verification history port.

An append-only log of finalization outcomes with a single global counter.
Records are never mutated or removed.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stakevote.domain.models.history_record import HistoryRecord
    from stakevote.domain.models.queue_entry import QueueStatus


class VerificationHistoryProtocol(Protocol):
    """Protocol for the verification history log.

    Implementations must allocate ids atomically: the id given to a new
    record is the counter value before the append, and the counter is
    incremented exactly once per append.
    """

    @abstractmethod
    async def append(
        self,
        content_id: str,
        status: QueueStatus,
        note: str,
        timestamp: int,
        verifier_count: int,
        total_stake: int,
    ) -> HistoryRecord:
        """Allocate the next verification id and append a record.

        Returns:
            The stored record, carrying its verification id.
        """
        ...

    @abstractmethod
    async def get(self, content_id: str, verification_id: int) -> HistoryRecord | None:
        """Get a record by (content, verification id), or None."""
        ...

    @abstractmethod
    async def list_for_content(self, content_id: str) -> list[HistoryRecord]:
        """List a content's records in verification-id order."""
        ...

    @abstractmethod
    async def next_verification_id(self) -> int:
        """Return the id the next append will receive."""
        ...
