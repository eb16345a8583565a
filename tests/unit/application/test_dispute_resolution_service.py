"""Unit tests for DisputeResolutionService.

Disputes can only be raised against verified content. Upholding one
sends the content back to pending and hides it in the registry.
"""

from __future__ import annotations

import pytest

from stakevote.application.services import DisputeResolutionService
from stakevote.config import VerificationConfig
from stakevote.domain.errors import (
    InvalidDisputeError,
    InvalidNoteError,
    NotRegisteredError,
    RegistryUpdateError,
    UnauthorizedError,
)
from stakevote.domain.events import DisputeRaisedEvent, DisputeResolvedEvent
from stakevote.domain.models import QueueEntry, QueueStatus
from stakevote.infrastructure.stubs import (
    AuthorityStub,
    ContentRegistryStub,
    DisputeRepositoryStub,
    ManualHeightClock,
    StatusUpdate,
    VerificationEventEmitterStub,
    VerificationQueueRepositoryStub,
)


@pytest.fixture
def service(
    queue_repo: VerificationQueueRepositoryStub,
    dispute_repo: DisputeRepositoryStub,
    registry: ContentRegistryStub,
    authority: AuthorityStub,
    clock: ManualHeightClock,
    config: VerificationConfig,
    event_emitter: VerificationEventEmitterStub,
) -> DisputeResolutionService:
    return DisputeResolutionService(
        queue_repo=queue_repo,
        dispute_repo=dispute_repo,
        registry=registry,
        authority=authority,
        clock=clock,
        config=config,
        event_emitter=event_emitter,
    )


async def _queue_in(
    queue_repo: VerificationQueueRepositoryStub, status: QueueStatus
) -> QueueEntry:
    entry = QueueEntry.open("hash1", 1000).with_vote("wallet_1", True, 1500)
    if status != QueueStatus.PENDING:
        entry = entry.with_status(status)
    await queue_repo.add(entry)
    return entry


class TestRaiseDispute:
    @pytest.mark.asyncio
    async def test_raise_against_verified_content(
        self,
        service: DisputeResolutionService,
        queue_repo: VerificationQueueRepositoryStub,
        clock: ManualHeightClock,
    ) -> None:
        await _queue_in(queue_repo, QueueStatus.VERIFIED)
        clock.set_height(2500)

        record = await service.raise_dispute("hash1", "wallet_2", "Incorrect info")

        assert record.note == "Incorrect info"
        assert record.timestamp == 2500
        assert record.resolved is False
        assert await service.get_dispute("hash1", "wallet_2") == record

    @pytest.mark.asyncio
    async def test_unqueued_content(self, service: DisputeResolutionService) -> None:
        with pytest.raises(NotRegisteredError):
            await service.raise_dispute("hash1", "wallet_2", "")

    @pytest.mark.parametrize("status", [QueueStatus.PENDING, QueueStatus.REJECTED])
    @pytest.mark.asyncio
    async def test_not_verified_content(
        self,
        service: DisputeResolutionService,
        queue_repo: VerificationQueueRepositoryStub,
        status: QueueStatus,
    ) -> None:
        await _queue_in(queue_repo, status)

        with pytest.raises(InvalidDisputeError) as exc_info:
            await service.raise_dispute("hash1", "wallet_2", "")

        assert exc_info.value.code == 106

    @pytest.mark.asyncio
    async def test_note_too_long(
        self,
        service: DisputeResolutionService,
        queue_repo: VerificationQueueRepositoryStub,
        dispute_repo: DisputeRepositoryStub,
    ) -> None:
        await _queue_in(queue_repo, QueueStatus.VERIFIED)

        with pytest.raises(InvalidDisputeError):
            await service.raise_dispute("hash1", "wallet_2", "x" * 201)

        assert len(dispute_repo) == 0

    @pytest.mark.asyncio
    async def test_raise_again_overwrites(
        self,
        service: DisputeResolutionService,
        queue_repo: VerificationQueueRepositoryStub,
        clock: ManualHeightClock,
        event_emitter: VerificationEventEmitterStub,
    ) -> None:
        await _queue_in(queue_repo, QueueStatus.VERIFIED)
        await service.raise_dispute("hash1", "wallet_2", "first")
        clock.advance(10)

        record = await service.raise_dispute("hash1", "wallet_2", "second")

        assert record.note == "second"
        assert record.timestamp == 1010
        assert await service.get_dispute("hash1", "wallet_2") == record
        assert event_emitter.emitted_events[-1] == DisputeRaisedEvent(
            content_id="hash1",
            disputer_id="wallet_2",
            height=1010,
            replaced_existing=True,
        )


class TestResolveDispute:
    @pytest.fixture
    async def disputed(
        self,
        service: DisputeResolutionService,
        queue_repo: VerificationQueueRepositoryStub,
        clock: ManualHeightClock,
    ) -> QueueEntry:
        entry = await _queue_in(queue_repo, QueueStatus.VERIFIED)
        clock.set_height(2500)
        await service.raise_dispute("hash1", "wallet_2", "Incorrect info")
        return entry

    @pytest.mark.asyncio
    async def test_upheld_reopens_and_hides(
        self,
        service: DisputeResolutionService,
        disputed: QueueEntry,
        queue_repo: VerificationQueueRepositoryStub,
        registry: ContentRegistryStub,
    ) -> None:
        resolved = await service.resolve_dispute(
            "hash1", "wallet_2", "deployer", True, "Dispute upheld"
        )

        assert resolved.resolved is True
        assert resolved.note == "Incorrect info"
        entry = await queue_repo.get("hash1")
        assert entry is not None
        assert entry.status == QueueStatus.PENDING
        assert entry.start_height == disputed.start_height
        assert entry.voters == disputed.voters
        assert registry.status_updates == [
            StatusUpdate(content_id="hash1", status="pending", visible=False)
        ]

    @pytest.mark.asyncio
    async def test_dismissed_keeps_verified(
        self,
        service: DisputeResolutionService,
        disputed: QueueEntry,
        queue_repo: VerificationQueueRepositoryStub,
        registry: ContentRegistryStub,
    ) -> None:
        resolved = await service.resolve_dispute(
            "hash1", "wallet_2", "deployer", False, "Dismissed"
        )

        assert resolved.resolved is True
        assert await queue_repo.get("hash1") == disputed
        assert registry.status_updates == []

    @pytest.mark.asyncio
    async def test_resolution_event(
        self,
        service: DisputeResolutionService,
        disputed: QueueEntry,
        event_emitter: VerificationEventEmitterStub,
    ) -> None:
        await service.resolve_dispute("hash1", "wallet_2", "deployer", True, "ok")

        assert event_emitter.emitted_events[-1] == DisputeResolvedEvent(
            content_id="hash1",
            disputer_id="wallet_2",
            authority_id="deployer",
            upheld=True,
            reopened=True,
            note="ok",
            height=2500,
        )

    @pytest.mark.asyncio
    async def test_unauthorized(
        self,
        service: DisputeResolutionService,
        disputed: QueueEntry,
        dispute_repo: DisputeRepositoryStub,
    ) -> None:
        with pytest.raises(UnauthorizedError):
            await service.resolve_dispute("hash1", "wallet_2", "wallet_9", True, "")

        record = await dispute_repo.get("hash1", "wallet_2")
        assert record is not None
        assert record.resolved is False

    @pytest.mark.asyncio
    async def test_missing_dispute(
        self, service: DisputeResolutionService, disputed: QueueEntry
    ) -> None:
        with pytest.raises(InvalidDisputeError, match="no dispute"):
            await service.resolve_dispute("hash1", "wallet_7", "deployer", True, "")

    @pytest.mark.asyncio
    async def test_second_resolution_fails(
        self, service: DisputeResolutionService, disputed: QueueEntry
    ) -> None:
        await service.resolve_dispute("hash1", "wallet_2", "deployer", False, "")

        with pytest.raises(InvalidDisputeError, match="already resolved"):
            await service.resolve_dispute("hash1", "wallet_2", "deployer", True, "")

    @pytest.mark.asyncio
    async def test_note_too_long(
        self, service: DisputeResolutionService, disputed: QueueEntry
    ) -> None:
        with pytest.raises(InvalidNoteError):
            await service.resolve_dispute(
                "hash1", "wallet_2", "deployer", True, "x" * 201
            )

    @pytest.mark.asyncio
    async def test_registry_failure_leaves_dispute_open(
        self,
        service: DisputeResolutionService,
        disputed: QueueEntry,
        queue_repo: VerificationQueueRepositoryStub,
        dispute_repo: DisputeRepositoryStub,
        registry: ContentRegistryStub,
    ) -> None:
        registry.fail_updates = True

        with pytest.raises(RegistryUpdateError):
            await service.resolve_dispute("hash1", "wallet_2", "deployer", True, "")

        record = await dispute_repo.get("hash1", "wallet_2")
        assert record is not None
        assert record.resolved is False
        assert await queue_repo.get("hash1") == disputed

    @pytest.mark.asyncio
    async def test_dismissal_ignores_registry_failure(
        self,
        service: DisputeResolutionService,
        disputed: QueueEntry,
        registry: ContentRegistryStub,
    ) -> None:
        registry.fail_updates = True

        resolved = await service.resolve_dispute(
            "hash1", "wallet_2", "deployer", False, ""
        )

        assert resolved.resolved is True


    @pytest.mark.asyncio
    async def test_upheld_on_rejected_content_does_not_reopen(
        self,
        service: DisputeResolutionService,
        disputed: QueueEntry,
        queue_repo: VerificationQueueRepositoryStub,
        registry: ContentRegistryStub,
    ) -> None:
        # Content reopened by another dispute and rejected on re-finalization.
        await queue_repo.save(
            disputed.with_status(QueueStatus.PENDING).with_status(
                QueueStatus.REJECTED
            )
        )

        resolved = await service.resolve_dispute(
            "hash1", "wallet_2", "deployer", True, ""
        )

        assert resolved.resolved is True
        entry = await queue_repo.get("hash1")
        assert entry is not None
        assert entry.status == QueueStatus.REJECTED
        assert registry.status_updates == []

    @pytest.mark.asyncio
    async def test_upheld_on_pending_content_hides_without_transition(
        self,
        service: DisputeResolutionService,
        disputed: QueueEntry,
        queue_repo: VerificationQueueRepositoryStub,
        registry: ContentRegistryStub,
    ) -> None:
        pending = disputed.with_status(QueueStatus.PENDING)
        await queue_repo.save(pending)

        await service.resolve_dispute("hash1", "wallet_2", "deployer", True, "")

        assert await queue_repo.get("hash1") == pending
        assert registry.status_updates == [
            StatusUpdate(content_id="hash1", status="pending", visible=False)
        ]
