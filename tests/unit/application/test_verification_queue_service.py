"""Unit tests for VerificationQueueService."""

from __future__ import annotations

import pytest

from stakevote.application.services import VerificationQueueService
from stakevote.config import VerificationConfig
from stakevote.domain.errors import AlreadyQueuedError, NotRegisteredError
from stakevote.domain.events import ContentQueuedEvent
from stakevote.domain.models import QueueStatus
from stakevote.infrastructure.stubs import (
    ContentRegistryStub,
    ManualHeightClock,
    VerificationEventEmitterStub,
    VerificationQueueRepositoryStub,
)


@pytest.fixture
def service(
    queue_repo: VerificationQueueRepositoryStub,
    registry: ContentRegistryStub,
    clock: ManualHeightClock,
    config: VerificationConfig,
    event_emitter: VerificationEventEmitterStub,
) -> VerificationQueueService:
    return VerificationQueueService(
        queue_repo=queue_repo,
        registry=registry,
        clock=clock,
        config=config,
        event_emitter=event_emitter,
    )


class TestEnqueue:
    @pytest.mark.asyncio
    async def test_enqueue_opens_pending_round_at_current_height(
        self, service: VerificationQueueService
    ) -> None:
        entry = await service.enqueue("hash1")

        assert entry.status == QueueStatus.PENDING
        assert entry.start_height == 1000
        assert entry.voter_count == 0
        assert await service.get("hash1") == entry

    @pytest.mark.asyncio
    async def test_enqueue_unregistered_content_fails(
        self,
        service: VerificationQueueService,
        queue_repo: VerificationQueueRepositoryStub,
    ) -> None:
        with pytest.raises(NotRegisteredError) as exc_info:
            await service.enqueue("invalid")

        assert exc_info.value.code == 107
        assert len(queue_repo) == 0

    @pytest.mark.asyncio
    async def test_enqueue_twice_fails_and_keeps_original(
        self, service: VerificationQueueService, clock: ManualHeightClock
    ) -> None:
        first = await service.enqueue("hash1")
        clock.advance(5)

        with pytest.raises(AlreadyQueuedError) as exc_info:
            await service.enqueue("hash1")

        assert exc_info.value.code == 102
        assert await service.get("hash1") == first

    @pytest.mark.asyncio
    async def test_not_registered_checked_before_already_queued(
        self,
        service: VerificationQueueService,
        registry: ContentRegistryStub,
    ) -> None:
        await service.enqueue("hash1")
        registry.registered.discard("hash1")

        with pytest.raises(NotRegisteredError):
            await service.enqueue("hash1")

    @pytest.mark.asyncio
    async def test_enqueue_emits_event(
        self,
        service: VerificationQueueService,
        event_emitter: VerificationEventEmitterStub,
    ) -> None:
        await service.enqueue("hash1")

        assert event_emitter.emitted_events == [
            ContentQueuedEvent(content_id="hash1", start_height=1000)
        ]

    @pytest.mark.asyncio
    async def test_failed_enqueue_emits_nothing(
        self,
        service: VerificationQueueService,
        event_emitter: VerificationEventEmitterStub,
    ) -> None:
        with pytest.raises(NotRegisteredError):
            await service.enqueue("invalid")

        assert event_emitter.emitted_events == []

    @pytest.mark.asyncio
    async def test_emitter_failure_does_not_undo_enqueue(
        self,
        service: VerificationQueueService,
        event_emitter: VerificationEventEmitterStub,
    ) -> None:
        event_emitter.should_fail = True

        entry = await service.enqueue("hash1")

        assert await service.get("hash1") == entry


class TestVotingOpen:
    @pytest.mark.asyncio
    async def test_unknown_content_is_not_open(
        self, service: VerificationQueueService
    ) -> None:
        assert await service.is_voting_open("hash1") is False

    @pytest.mark.asyncio
    async def test_open_until_period_elapses(
        self, service: VerificationQueueService, clock: ManualHeightClock
    ) -> None:
        await service.enqueue("hash1")

        clock.set_height(2439)
        assert await service.is_voting_open("hash1") is True

        clock.set_height(2440)
        assert await service.is_voting_open("hash1") is False

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(
        self, service: VerificationQueueService
    ) -> None:
        assert await service.get("nope") is None
