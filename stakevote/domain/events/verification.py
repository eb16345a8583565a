"""Content verification event payloads.

Every committed mutation of the verification engine produces one of these
immutable payloads for the audit trail:
- ContentQueuedEvent: content entered the verification queue
- VoteCastEvent: a staked vote was recorded
- VerificationFinalizedEvent: a voting round was closed
- DisputeRaisedEvent: verified content was challenged
- DisputeResolvedEvent: an authority resolved a dispute

Payloads are serialized as canonical JSON (sorted keys) so that their
BLAKE3 hash is stable across processes.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, ClassVar

import blake3

CONTENT_QUEUED_EVENT_TYPE: str = "content.queued"
VOTE_CAST_EVENT_TYPE: str = "content.vote_cast"
VERIFICATION_FINALIZED_EVENT_TYPE: str = "content.verification_finalized"
DISPUTE_RAISED_EVENT_TYPE: str = "content.dispute_raised"
DISPUTE_RESOLVED_EVENT_TYPE: str = "content.dispute_resolved"

VERIFICATION_EVENT_SCHEMA_VERSION: str = "1.0.0"


class VerificationEventMixin:
    """Shared serialization for verification event payloads.

    Subclasses define ``event_type`` and implement ``_payload``.
    """

    event_type: ClassVar[str]

    def _payload(self) -> dict[str, Any]:
        raise NotImplementedError

    def signable_content(self) -> bytes:
        """Return canonical bytes for hashing.

        Returns:
            UTF-8 encoded canonical JSON of the payload and its type.
        """
        content = {"event_type": self.event_type, **self._payload()}
        return json.dumps(content, sort_keys=True).encode("utf-8")

    def content_hash(self) -> str:
        """BLAKE3 hex digest of ``signable_content()``."""
        return blake3.blake3(self.signable_content()).hexdigest()

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for event storage.

        Returns:
            Dict with the payload fields, event type and schema version.
        """
        return {
            **self._payload(),
            "event_type": self.event_type,
            "schema_version": VERIFICATION_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class ContentQueuedEvent(VerificationEventMixin):
    """Content entered the verification queue.

    Attributes:
        content_id: The queued content.
        start_height: Height at which voting opened.
    """

    event_type: ClassVar[str] = CONTENT_QUEUED_EVENT_TYPE

    content_id: str
    start_height: int

    def _payload(self) -> dict[str, Any]:
        return {"content_id": self.content_id, "start_height": self.start_height}


@dataclass(frozen=True, eq=True)
class VoteCastEvent(VerificationEventMixin):
    """A staked vote was recorded.

    Attributes:
        content_id: The content voted on.
        voter_id: The voter.
        vote: True to approve.
        stake: Escrowed amount.
        height: Height of the vote.
        voter_count: Number of voters after this vote.
    """

    event_type: ClassVar[str] = VOTE_CAST_EVENT_TYPE

    content_id: str
    voter_id: str
    vote: bool
    stake: int
    height: int
    voter_count: int

    def _payload(self) -> dict[str, Any]:
        return {
            "content_id": self.content_id,
            "voter_id": self.voter_id,
            "vote": self.vote,
            "stake": self.stake,
            "height": self.height,
            "voter_count": self.voter_count,
        }


@dataclass(frozen=True, eq=True)
class VerificationFinalizedEvent(VerificationEventMixin):
    """A voting round was closed and recorded in history.

    Attributes:
        content_id: The content.
        verification_id: Global id of the history record.
        status: Outcome string ("verified" or "rejected").
        authority_id: The finalizing authority.
        height: Height of finalization.
        verifier_count: Votes cast in the round.
        total_stake: Stake escrowed in the round.
    """

    event_type: ClassVar[str] = VERIFICATION_FINALIZED_EVENT_TYPE

    content_id: str
    verification_id: int
    status: str
    authority_id: str
    height: int
    verifier_count: int
    total_stake: int

    def _payload(self) -> dict[str, Any]:
        return {
            "content_id": self.content_id,
            "verification_id": self.verification_id,
            "status": self.status,
            "authority_id": self.authority_id,
            "height": self.height,
            "verifier_count": self.verifier_count,
            "total_stake": self.total_stake,
        }


@dataclass(frozen=True, eq=True)
class DisputeRaisedEvent(VerificationEventMixin):
    """Verified content was challenged.

    Attributes:
        content_id: The disputed content.
        disputer_id: The disputer.
        height: Height at which the dispute was raised.
        replaced_existing: Whether an earlier record for the same
            disputer was overwritten.
    """

    event_type: ClassVar[str] = DISPUTE_RAISED_EVENT_TYPE

    content_id: str
    disputer_id: str
    height: int
    replaced_existing: bool = False

    def _payload(self) -> dict[str, Any]:
        return {
            "content_id": self.content_id,
            "disputer_id": self.disputer_id,
            "height": self.height,
            "replaced_existing": self.replaced_existing,
        }


@dataclass(frozen=True, eq=True)
class DisputeResolvedEvent(VerificationEventMixin):
    """An authority resolved a dispute.

    Attributes:
        content_id: The disputed content.
        disputer_id: The disputer.
        authority_id: The resolving authority.
        upheld: Whether the dispute was upheld.
        reopened: Whether the queue entry returned to pending.
        note: The authority's note.
        height: Height of resolution.
    """

    event_type: ClassVar[str] = DISPUTE_RESOLVED_EVENT_TYPE

    content_id: str
    disputer_id: str
    authority_id: str
    upheld: bool
    reopened: bool
    note: str
    height: int

    def _payload(self) -> dict[str, Any]:
        return {
            "content_id": self.content_id,
            "disputer_id": self.disputer_id,
            "authority_id": self.authority_id,
            "upheld": self.upheld,
            "reopened": self.reopened,
            "note": self.note,
            "height": self.height,
        }


VerificationEvent = (
    ContentQueuedEvent
    | VoteCastEvent
    | VerificationFinalizedEvent
    | DisputeRaisedEvent
    | DisputeResolvedEvent
)
