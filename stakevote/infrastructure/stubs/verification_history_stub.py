"""In-memory append-only verification history.

The log is an arena: records are appended to a list and indexed by
(content_id, verification_id). A single counter, guarded by an
asyncio.Lock, hands out verification ids starting at 0.

Thread-safety: Uses asyncio Lock for id allocation and append.
"""

from __future__ import annotations

import asyncio

from stakevote.domain.models.history_record import HistoryRecord
from stakevote.domain.models.queue_entry import QueueStatus


class VerificationHistoryStub:
    """In-memory implementation of VerificationHistoryProtocol.

    Attributes:
        _records: All records in append order.
        _index: Map of (content_id, verification_id) to position in _records.
        _counter: Id the next append will receive.
        _lock: Async lock serializing allocation and append.
    """

    def __init__(self) -> None:
        """Initialize an empty log."""
        self._records: list[HistoryRecord] = []
        self._index: dict[tuple[str, int], int] = {}
        self._counter = 0
        self._lock = asyncio.Lock()

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
            The stored record.
        """
        async with self._lock:
            record = HistoryRecord(
                verification_id=self._counter,
                content_id=content_id,
                status=status,
                note=note,
                timestamp=timestamp,
                verifier_count=verifier_count,
                total_stake=total_stake,
            )
            self._index[(content_id, record.verification_id)] = len(self._records)
            self._records.append(record)
            self._counter += 1
            return record

    async def get(self, content_id: str, verification_id: int) -> HistoryRecord | None:
        position = self._index.get((content_id, verification_id))
        if position is None:
            return None
        return self._records[position]

    async def list_for_content(self, content_id: str) -> list[HistoryRecord]:
        return [record for record in self._records if record.content_id == content_id]

    async def next_verification_id(self) -> int:
        async with self._lock:
            return self._counter

    def all_records(self) -> list[HistoryRecord]:
        """Return every record in append order (test helper)."""
        return list(self._records)
