"""Application ports (hexagonal architecture).

Ports define the interfaces the verification services depend on.
Adapters in stakevote.infrastructure implement them.
"""

from stakevote.application.ports.authority import AuthorityProtocol
from stakevote.application.ports.content_registry import ContentRegistryProtocol
from stakevote.application.ports.content_verification import (
    ContentVerificationProtocol,
    OperationResult,
)
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

__all__: list[str] = [
    "AuthorityProtocol",
    "ContentRegistryProtocol",
    "ContentVerificationProtocol",
    "DisputeRepositoryProtocol",
    "EscrowProtocol",
    "HeightClockProtocol",
    "OperationResult",
    "VerificationEventEmitterPort",
    "VerificationHistoryProtocol",
    "VerificationQueueRepositoryProtocol",
    "VoteRepositoryProtocol",
]
