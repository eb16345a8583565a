"""Content verification engine facade.

Exposes the public operation surface of the verification engine. The
underlying services raise domain errors; this facade is the boundary at
which they become typed OperationResult values. Errors that are not
VerificationError (programming errors, broken adapters) still propagate.

Each operation runs under a fresh correlation ID, or under the caller's
when one is already set, and every log line it produces carries that ID.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

from stakevote.application.ports.content_verification import OperationResult
from stakevote.application.services.base import LoggingMixin
from stakevote.domain.errors import VerificationError
from stakevote.infrastructure.observability.correlation import correlation_scope

if TYPE_CHECKING:
    from stakevote.application.services.dispute_resolution_service import (
        DisputeResolutionService,
    )
    from stakevote.application.services.finalization_service import (
        FinalizationService,
    )
    from stakevote.application.services.verification_queue_service import (
        VerificationQueueService,
    )
    from stakevote.application.services.vote_ledger_service import VoteLedgerService
    from stakevote.domain.models.dispute_record import DisputeRecord
    from stakevote.domain.models.history_record import HistoryRecord
    from stakevote.domain.models.queue_entry import QueueEntry
    from stakevote.domain.models.vote_record import VoteRecord


class ContentVerificationEngine(LoggingMixin):
    """Implementation of ContentVerificationProtocol over the four services.

    Example:
        >>> engine = build_verification_engine()
        >>> result = await engine.enqueue("hash1")
        >>> result.ok
        True
        >>> result = await engine.cast_vote("hash1", "wallet_1", True, 500)
        >>> result.error_code
        104
    """

    def __init__(
        self,
        queue_service: VerificationQueueService,
        vote_ledger: VoteLedgerService,
        finalization_service: FinalizationService,
        dispute_service: DisputeResolutionService,
    ) -> None:
        self._queue = queue_service
        self._votes = vote_ledger
        self._finalization = finalization_service
        self._disputes = dispute_service
        self._init_logger(component="engine")

    async def _run(
        self, operation: str, call: Awaitable[Any], **context: object
    ) -> OperationResult:
        with correlation_scope():
            log = self._log_operation(operation, **context)
            try:
                value = await call
            except VerificationError as e:
                log.info(
                    "operation_failed",
                    error_kind=e.kind.name,
                    error_code=e.code,
                    detail=str(e),
                )
                return OperationResult.failure(e)
        return OperationResult.success(value)

    async def enqueue(self, content_id: str) -> OperationResult:
        """Open a voting round. Value on success: the QueueEntry."""
        return await self._run(
            "enqueue", self._queue.enqueue(content_id), content_id=content_id
        )

    async def cast_vote(
        self, content_id: str, voter_id: str, vote: bool, stake: int
    ) -> OperationResult:
        """Cast a staked vote. Value on success: the VoteRecord."""
        return await self._run(
            "cast_vote",
            self._votes.cast_vote(content_id, voter_id, vote, stake),
            content_id=content_id,
            voter_id=voter_id,
        )

    async def finalize(
        self, content_id: str, authority_id: str, note: str
    ) -> OperationResult:
        """Close an elapsed round. Value on success: the HistoryRecord."""
        return await self._run(
            "finalize",
            self._finalization.finalize(content_id, authority_id, note),
            content_id=content_id,
            authority_id=authority_id,
        )

    async def raise_dispute(
        self, content_id: str, disputer_id: str, note: str
    ) -> OperationResult:
        """Dispute verified content. Value on success: the DisputeRecord."""
        return await self._run(
            "raise_dispute",
            self._disputes.raise_dispute(content_id, disputer_id, note),
            content_id=content_id,
            disputer_id=disputer_id,
        )

    async def resolve_dispute(
        self,
        content_id: str,
        disputer_id: str,
        authority_id: str,
        upheld: bool,
        note: str,
    ) -> OperationResult:
        """Resolve a dispute. Value on success: the resolved DisputeRecord."""
        return await self._run(
            "resolve_dispute",
            self._disputes.resolve_dispute(
                content_id, disputer_id, authority_id, upheld, note
            ),
            content_id=content_id,
            disputer_id=disputer_id,
            authority_id=authority_id,
        )

    async def get_queue_entry(self, content_id: str) -> QueueEntry | None:
        return await self._queue.get(content_id)

    async def get_vote(self, content_id: str, voter_id: str) -> VoteRecord | None:
        return await self._votes.get_vote(content_id, voter_id)

    async def get_dispute(
        self, content_id: str, disputer_id: str
    ) -> DisputeRecord | None:
        return await self._disputes.get_dispute(content_id, disputer_id)

    async def get_history(
        self, content_id: str, verification_id: int
    ) -> HistoryRecord | None:
        return await self._finalization.get_history(content_id, verification_id)

    async def list_history(self, content_id: str) -> list[HistoryRecord]:
        return await self._finalization.list_history(content_id)

    async def is_voting_open(self, content_id: str) -> bool:
        return await self._queue.is_voting_open(content_id)
