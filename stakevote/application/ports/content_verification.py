"""Content verification port.

This module defines the public surface of the verification engine and the
typed result its mutating operations return. Domain failures are reported
as OperationResult values; they never escape the engine as exceptions.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from stakevote.domain.errors import VerificationError, VerificationErrorKind

if TYPE_CHECKING:
    from stakevote.domain.models.dispute_record import DisputeRecord
    from stakevote.domain.models.history_record import HistoryRecord
    from stakevote.domain.models.queue_entry import QueueEntry
    from stakevote.domain.models.vote_record import VoteRecord


@dataclass(frozen=True, eq=True)
class OperationResult:
    """Tagged success/failure result of a mutating operation.

    Attributes:
        ok: True if the operation committed.
        value: The committed record on success (QueueEntry, VoteRecord,
            HistoryRecord or DisputeRecord), None on failure.
        error_kind: Kind of failure, None on success.
        message: Human-readable failure description, None on success.

    Example:
        >>> result = OperationResult.failure(NotRegisteredError("hash1"))
        >>> result.error_code
        107
    """

    ok: bool
    value: Any = None
    error_kind: VerificationErrorKind | None = None
    message: str | None = None

    @classmethod
    def success(cls, value: Any = None) -> OperationResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: VerificationError) -> OperationResult:
        return cls(ok=False, error_kind=error.kind, message=str(error))

    @property
    def error_code(self) -> int | None:
        """Numeric code of the failure, None on success."""
        return self.error_kind.code if self.error_kind is not None else None


class ContentVerificationProtocol(Protocol):
    """Protocol for the content verification engine.

    Mutating operations are serialized per content identifier and are
    all-or-nothing: a failed operation has no observable effect and is
    always safe to retry.
    """

    @abstractmethod
    async def enqueue(self, content_id: str) -> OperationResult:
        """Open a voting round for registered content."""
        ...

    @abstractmethod
    async def cast_vote(
        self, content_id: str, voter_id: str, vote: bool, stake: int
    ) -> OperationResult:
        """Record a staked vote while the round is open."""
        ...

    @abstractmethod
    async def finalize(
        self, content_id: str, authority_id: str, note: str
    ) -> OperationResult:
        """Close an elapsed round and record its outcome."""
        ...

    @abstractmethod
    async def raise_dispute(
        self, content_id: str, disputer_id: str, note: str
    ) -> OperationResult:
        """Challenge verified content."""
        ...

    @abstractmethod
    async def resolve_dispute(
        self,
        content_id: str,
        disputer_id: str,
        authority_id: str,
        upheld: bool,
        note: str,
    ) -> OperationResult:
        """Resolve an open dispute, reopening the content if upheld."""
        ...

    @abstractmethod
    async def get_queue_entry(self, content_id: str) -> QueueEntry | None: ...

    @abstractmethod
    async def get_vote(self, content_id: str, voter_id: str) -> VoteRecord | None: ...

    @abstractmethod
    async def get_dispute(
        self, content_id: str, disputer_id: str
    ) -> DisputeRecord | None: ...

    @abstractmethod
    async def get_history(
        self, content_id: str, verification_id: int
    ) -> HistoryRecord | None: ...

    @abstractmethod
    async def list_history(self, content_id: str) -> list[HistoryRecord]:
        """All history records of the content, oldest first."""
        ...

    @abstractmethod
    async def is_voting_open(self, content_id: str) -> bool:
        """Whether votes may currently be cast on the content."""
        ...
