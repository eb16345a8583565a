"""Dispute resolution service.

Participants may dispute verified content. An authority resolves each
dispute exactly once; an upheld dispute sends the content back to pending
and hides it in the registry.

The reopened entry keeps its start height and vote aggregates, so its
voting window is already elapsed and it can be finalized again at once.
Rejected content is terminal: upholding a dispute against content that
has since been rejected resolves the dispute without reopening anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stakevote.application.services.base import LoggingMixin, emit_after_commit
from stakevote.application.services.content_lock import ContentLockRegistry
from stakevote.config import DEFAULT_VERIFICATION_CONFIG, VerificationConfig
from stakevote.domain.errors import (
    InvalidDisputeError,
    InvalidNoteError,
    NotRegisteredError,
    RegistryUpdateError,
    UnauthorizedError,
)
from stakevote.domain.events import DisputeRaisedEvent, DisputeResolvedEvent
from stakevote.domain.models.dispute_record import DisputeRecord
from stakevote.domain.models.queue_entry import QueueStatus

if TYPE_CHECKING:
    from stakevote.application.ports.authority import AuthorityProtocol
    from stakevote.application.ports.content_registry import ContentRegistryProtocol
    from stakevote.application.ports.dispute_repository import (
        DisputeRepositoryProtocol,
    )
    from stakevote.application.ports.height_clock import HeightClockProtocol
    from stakevote.application.ports.verification_event_emitter import (
        VerificationEventEmitterPort,
    )
    from stakevote.application.ports.verification_queue_repository import (
        VerificationQueueRepositoryProtocol,
    )


class DisputeResolutionService(LoggingMixin):
    """Service for raising and resolving disputes against verified content."""

    def __init__(
        self,
        queue_repo: VerificationQueueRepositoryProtocol,
        dispute_repo: DisputeRepositoryProtocol,
        registry: ContentRegistryProtocol,
        authority: AuthorityProtocol,
        clock: HeightClockProtocol,
        config: VerificationConfig = DEFAULT_VERIFICATION_CONFIG,
        locks: ContentLockRegistry | None = None,
        event_emitter: VerificationEventEmitterPort | None = None,
    ) -> None:
        """Initialize the dispute resolution service.

        Args:
            queue_repo: Repository for queue entries.
            dispute_repo: Repository for dispute records.
            registry: External content registry, told about reopened content.
            authority: Authority check for resolutions.
            clock: Logical height clock.
            config: Voting policy (note caps).
            locks: Shared per-content locks.
            event_emitter: Optional audit event emitter.
        """
        self._queue_repo = queue_repo
        self._dispute_repo = dispute_repo
        self._registry = registry
        self._authority = authority
        self._clock = clock
        self._config = config
        self._locks = locks if locks is not None else ContentLockRegistry()
        self._event_emitter = event_emitter
        self._init_logger()

    async def raise_dispute(
        self,
        content_id: str,
        disputer_id: str,
        note: str,
    ) -> DisputeRecord:
        """Dispute verified content.

        A disputer holds one record per content. Raising again replaces
        the stored note and height (last write wins).

        Args:
            content_id: The content to dispute.
            disputer_id: The disputing participant.
            note: Explanation, at most ``max_dispute_note_len``.

        Returns:
            The stored, unresolved DisputeRecord.

        Raises:
            NotRegisteredError: Content is not queued.
            InvalidDisputeError: Content is not verified, or note too long.
        """
        log = self._log_operation(
            "raise_dispute", content_id=content_id, disputer_id=disputer_id
        )

        async with self._locks.hold(content_id):
            entry = await self._queue_repo.get(content_id)
            if entry is None:
                log.warning("dispute_rejected", reason="not_queued")
                raise NotRegisteredError(content_id, "content is not queued")

            if entry.status != QueueStatus.VERIFIED:
                log.warning(
                    "dispute_rejected", reason="not_verified", status=entry.status.value
                )
                raise InvalidDisputeError(
                    content_id, f"content is {entry.status.value}, not verified"
                )

            if len(note) > self._config.max_dispute_note_len:
                log.warning("dispute_rejected", reason="note_too_long", length=len(note))
                raise InvalidDisputeError(
                    content_id,
                    f"note length {len(note)} exceeds maximum of "
                    f"{self._config.max_dispute_note_len}",
                )

            height = self._clock.current_height()
            record = DisputeRecord(
                content_id=content_id,
                disputer_id=disputer_id,
                note=note,
                timestamp=height,
            )
            replaced = await self._dispute_repo.put(record)

        if replaced is not None:
            log.info(
                "dispute_replaced",
                previous_height=replaced.timestamp,
                previous_resolved=replaced.resolved,
            )
        log.info("dispute_raised", height=height)
        await emit_after_commit(
            self._event_emitter,
            DisputeRaisedEvent(
                content_id=content_id,
                disputer_id=disputer_id,
                height=height,
                replaced_existing=replaced is not None,
            ),
            log,
        )
        return record

    async def resolve_dispute(
        self,
        content_id: str,
        disputer_id: str,
        authority_id: str,
        upheld: bool,
        note: str,
    ) -> DisputeRecord:
        """Resolve an open dispute.

        Args:
            content_id: The disputed content.
            disputer_id: Whose dispute to resolve.
            authority_id: The caller; must pass the authority check.
            upheld: True to side with the disputer and reopen the content.
            note: Authority's note, at most ``max_verification_note_len``.

        Returns:
            The resolved DisputeRecord.

        Raises:
            UnauthorizedError: Caller is not an authority.
            InvalidDisputeError: No such dispute, or it is already resolved.
            InvalidNoteError: Note is too long.
            RegistryUpdateError: Registry refused the pending status; the
                dispute stays unresolved.
        """
        log = self._log_operation(
            "resolve_dispute",
            content_id=content_id,
            disputer_id=disputer_id,
            authority_id=authority_id,
            upheld=upheld,
        )

        async with self._locks.hold(content_id):
            if not await self._authority.is_authorized(authority_id):
                log.warning("resolution_rejected", reason="unauthorized")
                raise UnauthorizedError(authority_id, content_id)

            dispute = await self._dispute_repo.get(content_id, disputer_id)
            if dispute is None:
                log.warning("resolution_rejected", reason="no_dispute")
                raise InvalidDisputeError(content_id, "no dispute from this disputer")
            if dispute.resolved:
                log.warning("resolution_rejected", reason="already_resolved")
                raise InvalidDisputeError(content_id, "dispute is already resolved")

            if len(note) > self._config.max_verification_note_len:
                log.warning(
                    "resolution_rejected", reason="note_too_long", length=len(note)
                )
                raise InvalidNoteError(
                    content_id, len(note), self._config.max_verification_note_len
                )

            reopened_entry = None
            if upheld:
                entry = await self._queue_repo.get(content_id)
                if entry is not None and entry.status == QueueStatus.REJECTED:
                    log.warning("upheld_dispute_on_rejected_content")
                elif entry is not None:
                    try:
                        await self._registry.update_status(
                            content_id, QueueStatus.PENDING.value, False
                        )
                    except RegistryUpdateError as e:
                        log.error(
                            "resolution_aborted",
                            reason="registry_update_failed",
                            error=str(e),
                        )
                        raise
                    if entry.status == QueueStatus.VERIFIED:
                        reopened_entry = entry.with_status(QueueStatus.PENDING)

            height = self._clock.current_height()
            resolved = dispute.mark_resolved()
            await self._dispute_repo.put(resolved)
            if reopened_entry is not None:
                await self._queue_repo.save(reopened_entry)

        log.info("dispute_resolved", reopened=reopened_entry is not None)
        await emit_after_commit(
            self._event_emitter,
            DisputeResolvedEvent(
                content_id=content_id,
                disputer_id=disputer_id,
                authority_id=authority_id,
                upheld=upheld,
                reopened=reopened_entry is not None,
                note=note,
                height=height,
            ),
            log,
        )
        return resolved

    async def get_dispute(
        self, content_id: str, disputer_id: str
    ) -> DisputeRecord | None:
        """Read a dispute record. Never fails."""
        return await self._dispute_repo.get(content_id, disputer_id)
