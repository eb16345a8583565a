"""Verification queue service.

Owns the lifecycle of queue entries: content enters the queue once,
after the registry confirms it exists, and is never removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stakevote.application.services.base import LoggingMixin, emit_after_commit
from stakevote.application.services.content_lock import ContentLockRegistry
from stakevote.config import DEFAULT_VERIFICATION_CONFIG, VerificationConfig
from stakevote.domain.errors import AlreadyQueuedError, NotRegisteredError
from stakevote.domain.events import ContentQueuedEvent
from stakevote.domain.models.queue_entry import QueueEntry

if TYPE_CHECKING:
    from stakevote.application.ports.content_registry import ContentRegistryProtocol
    from stakevote.application.ports.height_clock import HeightClockProtocol
    from stakevote.application.ports.verification_event_emitter import (
        VerificationEventEmitterPort,
    )
    from stakevote.application.ports.verification_queue_repository import (
        VerificationQueueRepositoryProtocol,
    )


class VerificationQueueService(LoggingMixin):
    """Service for adding content to the verification queue.

    Example:
        >>> service = VerificationQueueService(
        ...     queue_repo=queue_repo,
        ...     registry=registry,
        ...     clock=clock,
        ... )
        >>> entry = await service.enqueue("hash1")
        >>> entry.status
        <QueueStatus.PENDING: 'pending'>
    """

    def __init__(
        self,
        queue_repo: VerificationQueueRepositoryProtocol,
        registry: ContentRegistryProtocol,
        clock: HeightClockProtocol,
        config: VerificationConfig = DEFAULT_VERIFICATION_CONFIG,
        locks: ContentLockRegistry | None = None,
        event_emitter: VerificationEventEmitterPort | None = None,
    ) -> None:
        """Initialize the queue service.

        Args:
            queue_repo: Repository for queue entries.
            registry: External content registry.
            clock: Logical height clock.
            config: Voting policy.
            locks: Shared per-content locks. Pass the same registry to every
                service of one engine.
            event_emitter: Optional audit event emitter.
        """
        self._queue_repo = queue_repo
        self._registry = registry
        self._clock = clock
        self._config = config
        self._locks = locks if locks is not None else ContentLockRegistry()
        self._event_emitter = event_emitter
        self._init_logger()

    async def enqueue(self, content_id: str) -> QueueEntry:
        """Open a voting round for registered content.

        Args:
            content_id: The content to queue.

        Returns:
            The new pending entry.

        Raises:
            NotRegisteredError: The registry does not know the content.
            AlreadyQueuedError: The content already has a queue entry.
        """
        log = self._log_operation("enqueue", content_id=content_id)

        async with self._locks.hold(content_id):
            if not await self._registry.is_registered(content_id):
                log.warning("enqueue_rejected", reason="not_registered")
                raise NotRegisteredError(content_id)

            if await self._queue_repo.get(content_id) is not None:
                log.warning("enqueue_rejected", reason="already_queued")
                raise AlreadyQueuedError(content_id)

            entry = QueueEntry.open(content_id, self._clock.current_height())
            await self._queue_repo.add(entry)

        log.info("content_queued", start_height=entry.start_height)
        await emit_after_commit(
            self._event_emitter,
            ContentQueuedEvent(content_id=content_id, start_height=entry.start_height),
            log,
        )
        return entry

    async def get(self, content_id: str) -> QueueEntry | None:
        """Read a queue entry. Never fails."""
        return await self._queue_repo.get(content_id)

    async def is_voting_open(self, content_id: str) -> bool:
        """Check whether votes may currently be cast on the content.

        True iff the entry exists, is pending, and fewer than
        ``voting_period`` height units have elapsed since it opened.
        """
        entry = await self._queue_repo.get(content_id)
        if entry is None:
            return False
        return entry.is_voting_open(
            self._clock.current_height(), self._config.voting_period
        )
