"""Vote repository port.

Enforces one VoteRecord per (content_id, voter_id) pair.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stakevote.domain.models.vote_record import VoteRecord


class VoteRepositoryProtocol(Protocol):
    """Repository protocol for vote records."""

    @abstractmethod
    async def get(self, content_id: str, voter_id: str) -> VoteRecord | None:
        """Get the vote of a voter on a content, or None."""
        ...

    @abstractmethod
    async def add(self, record: VoteRecord) -> None:
        """Store a new vote record.

        Raises:
            AlreadyVotedError: If the pair already has a vote.
        """
        ...

    @abstractmethod
    async def list_for_content(self, content_id: str) -> list[VoteRecord]:
        """List the votes on a content in recording order."""
        ...
