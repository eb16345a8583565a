"""
Pytest configuration and shared fixtures for stakevote tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Heights start at 1000 so that window arithmetic is never near zero
"""

import pytest

from stakevote.application.services.content_verification_engine import (
    ContentVerificationEngine,
)
from stakevote.bootstrap.verification import (
    build_verification_engine,
    reset_verification_engine,
)
from stakevote.config import DEFAULT_VERIFICATION_CONFIG, VerificationConfig
from stakevote.infrastructure.stubs import (
    AuthorityStub,
    ContentRegistryStub,
    DisputeRepositoryStub,
    EscrowStub,
    ManualHeightClock,
    VerificationEventEmitterStub,
    VerificationHistoryStub,
    VerificationQueueRepositoryStub,
    VoteRepositoryStub,
)

START_HEIGHT = 1000
AUTHORITY_ID = "deployer"
CONTENT_ID = "hash1"


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from stakevote import __version__

    return __version__


@pytest.fixture
def config() -> VerificationConfig:
    """Production policy values (50 voters, 1000 stake, 1440 blocks, 70%)."""
    return DEFAULT_VERIFICATION_CONFIG


@pytest.fixture
def clock() -> ManualHeightClock:
    return ManualHeightClock(start_height=START_HEIGHT)


@pytest.fixture
def registry() -> ContentRegistryStub:
    """Registry that knows hash1 and hash2 only."""
    return ContentRegistryStub(registered={CONTENT_ID, "hash2"})


@pytest.fixture
def authority() -> AuthorityStub:
    return AuthorityStub({AUTHORITY_ID})


@pytest.fixture
def escrow() -> EscrowStub:
    return EscrowStub()


@pytest.fixture
def queue_repo() -> VerificationQueueRepositoryStub:
    return VerificationQueueRepositoryStub()


@pytest.fixture
def vote_repo() -> VoteRepositoryStub:
    return VoteRepositoryStub()


@pytest.fixture
def dispute_repo() -> DisputeRepositoryStub:
    return DisputeRepositoryStub()


@pytest.fixture
def history() -> VerificationHistoryStub:
    return VerificationHistoryStub()


@pytest.fixture
def event_emitter() -> VerificationEventEmitterStub:
    return VerificationEventEmitterStub()


@pytest.fixture
def engine(
    config: VerificationConfig,
    clock: ManualHeightClock,
    registry: ContentRegistryStub,
    authority: AuthorityStub,
    escrow: EscrowStub,
    queue_repo: VerificationQueueRepositoryStub,
    vote_repo: VoteRepositoryStub,
    dispute_repo: DisputeRepositoryStub,
    history: VerificationHistoryStub,
    event_emitter: VerificationEventEmitterStub,
) -> ContentVerificationEngine:
    """Engine wired to the fixture stubs so tests can inspect them."""
    return build_verification_engine(
        config=config,
        registry=registry,
        authority=authority,
        escrow=escrow,
        clock=clock,
        queue_repo=queue_repo,
        vote_repo=vote_repo,
        dispute_repo=dispute_repo,
        history=history,
        event_emitter=event_emitter,
    )


@pytest.fixture(autouse=True)
def _reset_engine_singleton():
    """Keep the process-wide engine from leaking between tests."""
    yield
    reset_verification_engine()
