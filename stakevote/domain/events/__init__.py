"""Domain events for content verification."""

from stakevote.domain.events.verification import (
    CONTENT_QUEUED_EVENT_TYPE,
    DISPUTE_RAISED_EVENT_TYPE,
    DISPUTE_RESOLVED_EVENT_TYPE,
    VERIFICATION_EVENT_SCHEMA_VERSION,
    VERIFICATION_FINALIZED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    ContentQueuedEvent,
    DisputeRaisedEvent,
    DisputeResolvedEvent,
    VerificationEvent,
    VerificationFinalizedEvent,
    VoteCastEvent,
)

__all__: list[str] = [
    "CONTENT_QUEUED_EVENT_TYPE",
    "DISPUTE_RAISED_EVENT_TYPE",
    "DISPUTE_RESOLVED_EVENT_TYPE",
    "VERIFICATION_EVENT_SCHEMA_VERSION",
    "VERIFICATION_FINALIZED_EVENT_TYPE",
    "VOTE_CAST_EVENT_TYPE",
    "ContentQueuedEvent",
    "DisputeRaisedEvent",
    "DisputeResolvedEvent",
    "VerificationEvent",
    "VerificationFinalizedEvent",
    "VoteCastEvent",
]
