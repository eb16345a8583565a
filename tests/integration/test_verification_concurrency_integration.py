"""Integration tests for concurrent engine operations.

Operations on the same content are serialized; operations on different
content interleave freely. Verification ids stay globally ordered.
"""

from __future__ import annotations

import asyncio

import pytest

from stakevote.application.services import ContentVerificationEngine
from stakevote.domain.errors import VerificationErrorKind
from stakevote.domain.models import QueueStatus
from stakevote.infrastructure.stubs import (
    ContentRegistryStub,
    EscrowStub,
    ManualHeightClock,
    VerificationHistoryStub,
)


class TestConcurrentVotes:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_concurrent_distinct_voters_all_recorded(
        self, engine: ContentVerificationEngine
    ) -> None:
        await engine.enqueue("hash1")

        results = await asyncio.gather(
            *(
                engine.cast_vote("hash1", f"wallet_{i}", i % 2 == 0, 1000 + i)
                for i in range(20)
            )
        )

        assert all(r.ok for r in results)
        entry = await engine.get_queue_entry("hash1")
        assert entry is not None
        assert entry.voter_count == 20
        assert entry.yes_votes == 10
        assert entry.no_votes == 10
        assert entry.total_stake == sum(1000 + i for i in range(20))

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_concurrent_duplicate_vote_counted_once(
        self, engine: ContentVerificationEngine, escrow: EscrowStub
    ) -> None:
        await engine.enqueue("hash1")

        results = await asyncio.gather(
            *(engine.cast_vote("hash1", "wallet_1", True, 1000) for _ in range(5))
        )

        assert sum(r.ok for r in results) == 1
        assert {
            r.error_kind for r in results if not r.ok
        } == {VerificationErrorKind.ALREADY_VOTED}
        assert len(escrow.transfers) == 1

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_concurrent_votes_never_exceed_cap(
        self, engine: ContentVerificationEngine
    ) -> None:
        await engine.enqueue("hash1")

        results = await asyncio.gather(
            *(engine.cast_vote("hash1", f"wallet_{i}", True, 1000) for i in range(60))
        )

        assert sum(r.ok for r in results) == 50
        assert sum(r.error_code == 108 for r in results) == 10


class TestConcurrentFinalization:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_double_finalize_records_once(
        self,
        engine: ContentVerificationEngine,
        clock: ManualHeightClock,
        history: VerificationHistoryStub,
    ) -> None:
        await engine.enqueue("hash1")
        await engine.cast_vote("hash1", "wallet_1", True, 1000)
        clock.advance(1440)

        results = await asyncio.gather(
            engine.finalize("hash1", "deployer", "a"),
            engine.finalize("hash1", "deployer", "b"),
        )

        assert sorted(r.ok for r in results) == [False, True]
        assert len(history.all_records()) == 1

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_ids_are_unique_across_content(
        self,
        engine: ContentVerificationEngine,
        clock: ManualHeightClock,
        registry: ContentRegistryStub,
    ) -> None:
        content_ids = [f"doc_{i}" for i in range(10)]
        for content_id in content_ids:
            registry.register(content_id)
            await engine.enqueue(content_id)
            await engine.cast_vote(content_id, "wallet_1", True, 1000)
        clock.advance(1440)

        results = await asyncio.gather(
            *(engine.finalize(cid, "deployer", "") for cid in content_ids)
        )

        ids = sorted(r.value.verification_id for r in results)
        assert ids == list(range(10))
        for content_id in content_ids:
            entry = await engine.get_queue_entry(content_id)
            assert entry is not None
            assert entry.status == QueueStatus.VERIFIED
