"""Bootstrap wiring for the content verification engine.

Builds a ContentVerificationEngine from ports, defaulting every missing
collaborator to its in-memory stub. All services of one engine share a
single ContentLockRegistry so that per-content critical sections span
every mutating operation.
"""

from __future__ import annotations

from stakevote.application.ports.authority import AuthorityProtocol
from stakevote.application.ports.content_registry import ContentRegistryProtocol
from stakevote.application.ports.dispute_repository import DisputeRepositoryProtocol
from stakevote.application.ports.escrow import EscrowProtocol
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
from stakevote.application.ports.vote_repository import VoteRepositoryProtocol
from stakevote.application.services import (
    ContentLockRegistry,
    ContentVerificationEngine,
    DisputeResolutionService,
    FinalizationService,
    VerificationQueueService,
    VoteLedgerService,
)
from stakevote.config import VerificationConfig
from stakevote.infrastructure.stubs import (
    AuthorityStub,
    ContentRegistryStub,
    DisputeRepositoryStub,
    EscrowStub,
    ManualHeightClock,
    VerificationHistoryStub,
    VerificationQueueRepositoryStub,
    VoteRepositoryStub,
)

_engine: ContentVerificationEngine | None = None


def build_verification_engine(
    *,
    config: VerificationConfig | None = None,
    registry: ContentRegistryProtocol | None = None,
    authority: AuthorityProtocol | None = None,
    escrow: EscrowProtocol | None = None,
    clock: HeightClockProtocol | None = None,
    queue_repo: VerificationQueueRepositoryProtocol | None = None,
    vote_repo: VoteRepositoryProtocol | None = None,
    dispute_repo: DisputeRepositoryProtocol | None = None,
    history: VerificationHistoryProtocol | None = None,
    event_emitter: VerificationEventEmitterPort | None = None,
    locks: ContentLockRegistry | None = None,
) -> ContentVerificationEngine:
    """Wire a verification engine.

    Args:
        config: Voting policy; defaults to VerificationConfig.from_environment().
        registry: Content registry; defaults to a stub accepting every content.
        authority: Authority check; defaults to a stub with no authorities.
        escrow: Stake custody; defaults to an always-succeeding stub.
        clock: Height clock; defaults to a manual clock at height 0.
        queue_repo: Queue entry store.
        vote_repo: Vote record store.
        dispute_repo: Dispute record store.
        history: Verification history log.
        event_emitter: Optional audit event emitter.
        locks: Per-content lock registry shared by every service.

    Returns:
        A ready-to-use ContentVerificationEngine.
    """
    # Empty adapters with __len__ are falsy; only None selects a default.
    if config is None:
        config = VerificationConfig.from_environment()
    if registry is None:
        registry = ContentRegistryStub(accept_all=True)
    if authority is None:
        authority = AuthorityStub()
    if escrow is None:
        escrow = EscrowStub()
    if clock is None:
        clock = ManualHeightClock()
    if queue_repo is None:
        queue_repo = VerificationQueueRepositoryStub()
    if vote_repo is None:
        vote_repo = VoteRepositoryStub()
    if dispute_repo is None:
        dispute_repo = DisputeRepositoryStub()
    if history is None:
        history = VerificationHistoryStub()
    if locks is None:
        locks = ContentLockRegistry()

    return ContentVerificationEngine(
        queue_service=VerificationQueueService(
            queue_repo=queue_repo,
            registry=registry,
            clock=clock,
            config=config,
            locks=locks,
            event_emitter=event_emitter,
        ),
        vote_ledger=VoteLedgerService(
            queue_repo=queue_repo,
            vote_repo=vote_repo,
            escrow=escrow,
            clock=clock,
            config=config,
            locks=locks,
            event_emitter=event_emitter,
        ),
        finalization_service=FinalizationService(
            queue_repo=queue_repo,
            history=history,
            registry=registry,
            authority=authority,
            clock=clock,
            config=config,
            locks=locks,
            event_emitter=event_emitter,
        ),
        dispute_service=DisputeResolutionService(
            queue_repo=queue_repo,
            dispute_repo=dispute_repo,
            registry=registry,
            authority=authority,
            clock=clock,
            config=config,
            locks=locks,
            event_emitter=event_emitter,
        ),
    )


def get_verification_engine() -> ContentVerificationEngine:
    """Get the process-wide engine instance, building it on first use."""
    global _engine
    if _engine is None:
        _engine = build_verification_engine()
    return _engine


def set_verification_engine(engine: ContentVerificationEngine) -> None:
    """Set a custom engine (for testing)."""
    global _engine
    _engine = engine


def reset_verification_engine() -> None:
    """Reset the singleton instance (for testing)."""
    global _engine
    _engine = None
