"""Unit tests for verification engine wiring."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from stakevote.application.services import (
    ContentLockRegistry,
    ContentVerificationEngine,
)
from stakevote.bootstrap.verification import (
    build_verification_engine,
    get_verification_engine,
    reset_verification_engine,
    set_verification_engine,
)
from stakevote.config import VerificationConfig
from stakevote.infrastructure.stubs import (
    AuthorityStub,
    DisputeRepositoryStub,
    EscrowStub,
    ManualHeightClock,
    VerificationQueueRepositoryStub,
    VoteRepositoryStub,
)


class TestBuildVerificationEngine:
    @pytest.mark.asyncio
    async def test_defaults_accept_any_content(self) -> None:
        engine = build_verification_engine()

        result = await engine.enqueue("anything")

        assert result.ok
        assert result.value.start_height == 0

    @pytest.mark.asyncio
    async def test_default_authority_allows_nobody(self) -> None:
        engine = build_verification_engine()
        await engine.enqueue("hash1")

        result = await engine.finalize("hash1", "deployer", "")

        assert result.error_code == 100

    @pytest.mark.asyncio
    async def test_config_from_environment(self) -> None:
        with patch.dict(os.environ, {"STAKEVOTE_MIN_STAKE": "5"}):
            engine = build_verification_engine()
        await engine.enqueue("hash1")

        result = await engine.cast_vote("hash1", "w1", True, 5)

        assert result.ok

    @pytest.mark.asyncio
    async def test_services_share_collaborators(self) -> None:
        clock = ManualHeightClock(100)
        escrow = EscrowStub()
        engine = build_verification_engine(
            config=VerificationConfig(voting_period=5, custody_account="vault"),
            authority=AuthorityStub({"ops"}),
            escrow=escrow,
            clock=clock,
        )

        await engine.enqueue("hash1")
        await engine.cast_vote("hash1", "w1", True, 1000)
        clock.advance(5)
        result = await engine.finalize("hash1", "ops", "")

        assert result.ok
        assert escrow.total_received("vault") == 1000
        entry = await engine.get_queue_entry("hash1")
        assert entry is not None
        assert entry.status.value == "verified"

    @pytest.mark.asyncio
    async def test_injected_empty_repositories_are_used(self) -> None:
        clock = ManualHeightClock(100)
        queue_repo = VerificationQueueRepositoryStub()
        vote_repo = VoteRepositoryStub()
        dispute_repo = DisputeRepositoryStub()
        locks = ContentLockRegistry()
        engine = build_verification_engine(
            config=VerificationConfig(voting_period=5),
            authority=AuthorityStub({"ops"}),
            clock=clock,
            queue_repo=queue_repo,
            vote_repo=vote_repo,
            dispute_repo=dispute_repo,
            locks=locks,
        )

        assert (await engine.enqueue("hash1")).ok
        assert (await engine.cast_vote("hash1", "w1", True, 1000)).ok
        clock.advance(5)
        assert (await engine.finalize("hash1", "ops", "")).ok
        assert (await engine.raise_dispute("hash1", "w2", "wrong")).ok

        entry = await queue_repo.get("hash1")
        assert entry is not None
        assert entry.status.value == "verified"
        assert len(queue_repo) == 1
        assert len(vote_repo) == 1
        assert await vote_repo.get("hash1", "w1") is not None
        assert len(dispute_repo) == 1
        assert await dispute_repo.get("hash1", "w2") is not None
        assert len(locks) == 0


class TestEngineSingleton:
    def test_get_builds_once(self) -> None:
        reset_verification_engine()

        first = get_verification_engine()

        assert isinstance(first, ContentVerificationEngine)
        assert get_verification_engine() is first

    def test_set_and_reset(self) -> None:
        custom = build_verification_engine()
        set_verification_engine(custom)

        assert get_verification_engine() is custom

        reset_verification_engine()
        assert get_verification_engine() is not custom
