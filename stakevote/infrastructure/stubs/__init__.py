"""Infrastructure stubs for development and testing.

This module provides in-memory implementations of every verification
port.

Available stubs:
- VerificationQueueRepositoryStub: Queue entries keyed by content
- VoteRepositoryStub: Vote records with the (content, voter) unique constraint
- DisputeRepositoryStub: Dispute records, last write wins
- VerificationHistoryStub: Append-only history with a global id counter
- ContentRegistryStub: Registration lookup and status updates, failure injection
- AuthorityStub: Allow-list authority check
- EscrowStub: Stake transfers with optional balances, failure injection
- ManualHeightClock: Deterministic logical clock
- VerificationEventEmitterStub: Captures audit events

WARNING: These stubs are NOT for production use.
"""

from stakevote.infrastructure.stubs.authority_stub import AuthorityStub
from stakevote.infrastructure.stubs.content_registry_stub import (
    ContentRegistryStub,
    StatusUpdate,
)
from stakevote.infrastructure.stubs.dispute_repository_stub import (
    DisputeRepositoryStub,
)
from stakevote.infrastructure.stubs.escrow_stub import EscrowStub, Transfer
from stakevote.infrastructure.stubs.height_clock_stub import ManualHeightClock
from stakevote.infrastructure.stubs.verification_event_emitter_stub import (
    VerificationEventEmitterStub,
)
from stakevote.infrastructure.stubs.verification_history_stub import (
    VerificationHistoryStub,
)
from stakevote.infrastructure.stubs.verification_queue_repository_stub import (
    VerificationQueueRepositoryStub,
)
from stakevote.infrastructure.stubs.vote_repository_stub import VoteRepositoryStub

__all__: list[str] = [
    "AuthorityStub",
    "ContentRegistryStub",
    "DisputeRepositoryStub",
    "EscrowStub",
    "ManualHeightClock",
    "StatusUpdate",
    "Transfer",
    "VerificationEventEmitterStub",
    "VerificationHistoryStub",
    "VerificationQueueRepositoryStub",
    "VoteRepositoryStub",
]
