"""Application services for content verification."""

from stakevote.application.services.content_lock import ContentLockRegistry
from stakevote.application.services.content_verification_engine import (
    ContentVerificationEngine,
)
from stakevote.application.services.dispute_resolution_service import (
    DisputeResolutionService,
)
from stakevote.application.services.finalization_service import FinalizationService
from stakevote.application.services.verification_queue_service import (
    VerificationQueueService,
)
from stakevote.application.services.vote_ledger_service import VoteLedgerService

__all__: list[str] = [
    "ContentLockRegistry",
    "ContentVerificationEngine",
    "DisputeResolutionService",
    "FinalizationService",
    "VerificationQueueService",
    "VoteLedgerService",
]
