"""In-memory stub for DisputeRepositoryProtocol."""

from __future__ import annotations

from stakevote.domain.models.dispute_record import DisputeRecord


class DisputeRepositoryStub:
    """In-memory implementation of DisputeRepositoryProtocol.

    Records are keyed by (content_id, disputer_id); ``put`` replaces.
    """

    def __init__(self) -> None:
        """Initialize empty stub."""
        self._disputes: dict[tuple[str, str], DisputeRecord] = {}

    async def get(self, content_id: str, disputer_id: str) -> DisputeRecord | None:
        return self._disputes.get((content_id, disputer_id))

    async def put(self, record: DisputeRecord) -> DisputeRecord | None:
        """Store a record, returning the one it replaced (if any)."""
        key = (record.content_id, record.disputer_id)
        previous = self._disputes.get(key)
        self._disputes[key] = record
        return previous

    def __len__(self) -> int:
        return len(self._disputes)
