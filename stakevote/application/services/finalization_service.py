"""Finalization service.

Closes a voting round once its window has elapsed, decides the outcome,
appends a history record and tells the registry.

Outcome rule:
    total = yes_votes + no_votes
    total == 0                                -> rejected
    yes_votes * 100 // total >= threshold     -> verified
    otherwise                                 -> rejected

The registry is notified before anything local is written. If it refuses,
the round stays pending and no verification id is consumed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structlog import get_logger

from stakevote.application.services.base import emit_after_commit
from stakevote.application.services.content_lock import ContentLockRegistry
from stakevote.config import DEFAULT_VERIFICATION_CONFIG, VerificationConfig
from stakevote.domain.errors import (
    InvalidNoteError,
    NotRegisteredError,
    RegistryUpdateError,
    UnauthorizedError,
    VotingClosedError,
)
from stakevote.domain.events import VerificationFinalizedEvent
from stakevote.domain.models.history_record import HistoryRecord

if TYPE_CHECKING:
    from stakevote.application.ports.authority import AuthorityProtocol
    from stakevote.application.ports.content_registry import ContentRegistryProtocol
    from stakevote.application.ports.height_clock import HeightClockProtocol
    from stakevote.application.ports.verification_event_emitter import (
        VerificationEventEmitterPort,
    )
    from stakevote.application.ports.verification_history import (
        VerificationHistoryProtocol,
    )
    from stakevote.application.ports.verification_queue_repository import (
        VerificationQueueRepositoryProtocol,
    )

logger = get_logger(__name__)


class FinalizationService:
    """Service for closing voting rounds.

    The history log is written only by this service.
    """

    def __init__(
        self,
        queue_repo: VerificationQueueRepositoryProtocol,
        history: VerificationHistoryProtocol,
        registry: ContentRegistryProtocol,
        authority: AuthorityProtocol,
        clock: HeightClockProtocol,
        config: VerificationConfig = DEFAULT_VERIFICATION_CONFIG,
        locks: ContentLockRegistry | None = None,
        event_emitter: VerificationEventEmitterPort | None = None,
    ) -> None:
        self._queue_repo = queue_repo
        self._history = history
        self._registry = registry
        self._authority = authority
        self._clock = clock
        self._config = config
        self._locks = locks if locks is not None else ContentLockRegistry()
        self._event_emitter = event_emitter

    async def finalize(
        self,
        content_id: str,
        authority_id: str,
        note: str,
    ) -> HistoryRecord:
        """Close an elapsed round and record its outcome.

        Args:
            content_id: The content whose round to close.
            authority_id: The caller; must pass the authority check.
            note: Authority's note, at most ``max_verification_note_len``.

        Returns:
            The appended HistoryRecord.

        Raises:
            UnauthorizedError: Caller is not an authority.
            NotRegisteredError: Content is not queued.
            VotingClosedError: Entry is not pending or the window is still open.
            InvalidNoteError: Note is too long.
            RegistryUpdateError: Registry refused the status update.
        """
        log = logger.bind(content_id=content_id, authority_id=authority_id)

        async with self._locks.hold(content_id):
            if not await self._authority.is_authorized(authority_id):
                log.warning("finalize_rejected", reason="unauthorized")
                raise UnauthorizedError(authority_id, content_id)

            entry = await self._queue_repo.get(content_id)
            if entry is None:
                log.warning("finalize_rejected", reason="not_queued")
                raise NotRegisteredError(content_id, "content is not queued")

            height = self._clock.current_height()
            if not entry.is_ready_for_finalization(height, self._config.voting_period):
                log.warning(
                    "finalize_rejected",
                    reason="not_ready",
                    status=entry.status.value,
                    start_height=entry.start_height,
                    current_height=height,
                )
                raise VotingClosedError(
                    content_id,
                    "round cannot be finalized (not pending or voting still open)",
                    start_height=entry.start_height,
                    current_height=height,
                )

            if len(note) > self._config.max_verification_note_len:
                log.warning("finalize_rejected", reason="note_too_long", length=len(note))
                raise InvalidNoteError(
                    content_id, len(note), self._config.max_verification_note_len
                )

            outcome = entry.outcome(self._config.verification_threshold)

            try:
                await self._registry.update_status(content_id, outcome.value, True)
            except RegistryUpdateError as e:
                log.error(
                    "finalize_aborted",
                    reason="registry_update_failed",
                    outcome=outcome.value,
                    error=str(e),
                )
                raise

            updated = entry.with_status(outcome)
            record = await self._history.append(
                content_id=content_id,
                status=outcome,
                note=note,
                timestamp=height,
                verifier_count=entry.total_votes,
                total_stake=entry.total_stake,
            )
            await self._queue_repo.save(updated)

        log.info(
            "verification_finalized",
            verification_id=record.verification_id,
            outcome=outcome.value,
            approval_percentage=entry.approval_percentage(),
            verifier_count=record.verifier_count,
            total_stake=record.total_stake,
        )
        await emit_after_commit(
            self._event_emitter,
            VerificationFinalizedEvent(
                content_id=content_id,
                verification_id=record.verification_id,
                status=outcome.value,
                authority_id=authority_id,
                height=height,
                verifier_count=record.verifier_count,
                total_stake=record.total_stake,
            ),
            log,
        )
        return record

    async def get_history(
        self, content_id: str, verification_id: int
    ) -> HistoryRecord | None:
        """Read one history record. Never fails."""
        return await self._history.get(content_id, verification_id)

    async def list_history(self, content_id: str) -> list[HistoryRecord]:
        """List a content's history in verification-id order."""
        return await self._history.list_for_content(content_id)
