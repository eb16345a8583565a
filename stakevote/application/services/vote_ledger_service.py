"""Vote ledger service.

Records one staked vote per (content, voter) pair and drives the queue
entry's aggregates.

Checks run in a fixed order so that the reported error is deterministic:
1. Content is queued (NotRegistered)
2. Voting window is open (VotingClosed)
3. Voter has not voted yet (AlreadyVoted)
4. Stake meets the floor (InsufficientStake)
5. Voter set has room (MaxVotersReached)

The stake is escrowed before anything is written. An escrow failure
propagates unchanged and leaves no trace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structlog import get_logger

from stakevote.application.services.base import emit_after_commit
from stakevote.application.services.content_lock import ContentLockRegistry
from stakevote.config import DEFAULT_VERIFICATION_CONFIG, VerificationConfig
from stakevote.domain.errors import (
    AlreadyVotedError,
    EscrowTransferError,
    InsufficientStakeError,
    MaxVotersReachedError,
    NotRegisteredError,
    VotingClosedError,
)
from stakevote.domain.events import VoteCastEvent
from stakevote.domain.models.vote_record import VoteRecord

if TYPE_CHECKING:
    from stakevote.application.ports.escrow import EscrowProtocol
    from stakevote.application.ports.height_clock import HeightClockProtocol
    from stakevote.application.ports.verification_event_emitter import (
        VerificationEventEmitterPort,
    )
    from stakevote.application.ports.verification_queue_repository import (
        VerificationQueueRepositoryProtocol,
    )
    from stakevote.application.ports.vote_repository import VoteRepositoryProtocol

logger = get_logger(__name__)


class VoteLedgerService:
    """Service for casting staked votes on queued content.

    Example:
        >>> ledger = VoteLedgerService(
        ...     queue_repo=queue_repo,
        ...     vote_repo=vote_repo,
        ...     escrow=escrow,
        ...     clock=clock,
        ... )
        >>> record = await ledger.cast_vote("hash1", "wallet_1", True, 1000)
    """

    def __init__(
        self,
        queue_repo: VerificationQueueRepositoryProtocol,
        vote_repo: VoteRepositoryProtocol,
        escrow: EscrowProtocol,
        clock: HeightClockProtocol,
        config: VerificationConfig = DEFAULT_VERIFICATION_CONFIG,
        locks: ContentLockRegistry | None = None,
        event_emitter: VerificationEventEmitterPort | None = None,
    ) -> None:
        self._queue_repo = queue_repo
        self._vote_repo = vote_repo
        self._escrow = escrow
        self._clock = clock
        self._config = config
        self._locks = locks if locks is not None else ContentLockRegistry()
        self._event_emitter = event_emitter

    async def cast_vote(
        self,
        content_id: str,
        voter_id: str,
        vote: bool,
        stake: int,
    ) -> VoteRecord:
        """Cast a staked vote.

        The operation is atomic: either the vote record, the aggregate
        update and the escrow transfer all happen, or none of them do.

        Args:
            content_id: The content to vote on.
            voter_id: The voting participant.
            vote: True to approve, False to reject.
            stake: Amount to escrow with the vote.

        Returns:
            The recorded VoteRecord.

        Raises:
            NotRegisteredError: Content is not queued.
            VotingClosedError: Window elapsed or entry no longer pending.
            AlreadyVotedError: Voter already voted on this content.
            InsufficientStakeError: Stake below the minimum.
            MaxVotersReachedError: Voter set is full.
            EscrowTransferError: The stake could not be escrowed.
        """
        log = logger.bind(content_id=content_id, voter_id=voter_id)

        async with self._locks.hold(content_id):
            entry = await self._queue_repo.get(content_id)
            if entry is None:
                log.warning("vote_rejected", reason="not_queued")
                raise NotRegisteredError(content_id, "content is not queued")

            height = self._clock.current_height()
            if not entry.is_voting_open(height, self._config.voting_period):
                log.warning(
                    "vote_rejected",
                    reason="voting_closed",
                    status=entry.status.value,
                    start_height=entry.start_height,
                    current_height=height,
                )
                raise VotingClosedError(
                    content_id,
                    "voting is closed",
                    start_height=entry.start_height,
                    current_height=height,
                )

            existing = await self._vote_repo.get(content_id, voter_id)
            if existing is not None:
                log.info(
                    "duplicate_vote_attempt",
                    existing_vote_height=existing.timestamp,
                )
                raise AlreadyVotedError(content_id, voter_id, voted_at=existing.timestamp)

            if stake < self._config.min_stake:
                log.warning(
                    "vote_rejected",
                    reason="insufficient_stake",
                    stake=stake,
                    min_stake=self._config.min_stake,
                )
                raise InsufficientStakeError(content_id, stake, self._config.min_stake)

            if entry.voter_count >= self._config.max_voters:
                log.warning(
                    "vote_rejected",
                    reason="max_voters_reached",
                    max_voters=self._config.max_voters,
                )
                raise MaxVotersReachedError(content_id, self._config.max_voters)

            try:
                await self._escrow.transfer(
                    stake, voter_id, self._config.custody_account
                )
            except EscrowTransferError as e:
                log.warning("vote_rejected", reason="escrow_failed", error=str(e))
                raise

            record = VoteRecord(
                content_id=content_id,
                voter_id=voter_id,
                vote=vote,
                stake=stake,
                timestamp=height,
            )
            updated = entry.with_vote(voter_id, vote, stake)
            await self._vote_repo.add(record)
            await self._queue_repo.save(updated)

        log.info(
            "vote_recorded",
            vote=vote,
            stake=stake,
            height=height,
            yes_votes=updated.yes_votes,
            no_votes=updated.no_votes,
            total_stake=updated.total_stake,
        )
        await emit_after_commit(
            self._event_emitter,
            VoteCastEvent(
                content_id=content_id,
                voter_id=voter_id,
                vote=vote,
                stake=stake,
                height=height,
                voter_count=updated.voter_count,
            ),
            log,
        )
        return record

    async def get_vote(self, content_id: str, voter_id: str) -> VoteRecord | None:
        """Read a vote record. Never fails."""
        return await self._vote_repo.get(content_id, voter_id)

    async def list_votes(self, content_id: str) -> list[VoteRecord]:
        """List a content's votes in recording order."""
        return await self._vote_repo.list_for_content(content_id)
