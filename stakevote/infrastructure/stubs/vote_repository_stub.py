"""In-memory stub for VoteRepositoryProtocol.

Simulates the unique constraint on (content_id, voter_id).
"""

from __future__ import annotations

from stakevote.domain.errors import AlreadyVotedError
from stakevote.domain.models.vote_record import VoteRecord


class VoteRepositoryStub:
    """In-memory implementation of VoteRepositoryProtocol.

    This stub maintains a dictionary of vote records keyed by
    (content_id, voter_id). Insertion order is preserved, so listing a
    content's votes returns them in recording order.
    """

    def __init__(self) -> None:
        """Initialize empty stub."""
        # Key: (content_id, voter_id), Value: VoteRecord
        self._votes: dict[tuple[str, str], VoteRecord] = {}

    async def get(self, content_id: str, voter_id: str) -> VoteRecord | None:
        return self._votes.get((content_id, voter_id))

    async def add(self, record: VoteRecord) -> None:
        """Store a vote record.

        Raises:
            AlreadyVotedError: Unique constraint violation.
        """
        key = (record.content_id, record.voter_id)
        existing = self._votes.get(key)
        if existing is not None:
            raise AlreadyVotedError(
                record.content_id, record.voter_id, voted_at=existing.timestamp
            )
        self._votes[key] = record

    async def list_for_content(self, content_id: str) -> list[VoteRecord]:
        return [
            record for (cid, _), record in self._votes.items() if cid == content_id
        ]

    def __len__(self) -> int:
        return len(self._votes)
