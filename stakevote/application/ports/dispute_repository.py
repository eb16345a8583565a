"""Dispute repository port.

Stores one DisputeRecord per (content_id, disputer_id). ``put`` overwrites.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stakevote.domain.models.dispute_record import DisputeRecord


class DisputeRepositoryProtocol(Protocol):
    """Repository protocol for dispute records."""

    @abstractmethod
    async def get(self, content_id: str, disputer_id: str) -> DisputeRecord | None:
        """Get the dispute of a disputer on a content, or None."""
        ...

    @abstractmethod
    async def put(self, record: DisputeRecord) -> DisputeRecord | None:
        """Store a record, replacing any existing one for the same key.

        Returns:
            The record that was replaced, or None.
        """
        ...
