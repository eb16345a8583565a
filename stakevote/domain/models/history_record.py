"""Verification history domain model.

History records are append-only: one per successful finalization, keyed
by (content, verification id). Verification ids come from a single
process-wide counter, so they order finalizations across all content.
"""

from __future__ import annotations

from dataclasses import dataclass

from stakevote.domain.models.queue_entry import QueueStatus


@dataclass(frozen=True, eq=True)
class HistoryRecord:
    """Outcome of one closed voting round.

    Attributes:
        verification_id: Global, monotonically assigned id.
        content_id: The content the round was about.
        status: Outcome (VERIFIED or REJECTED).
        note: The finalizing authority's note.
        timestamp: Height at which the round was finalized.
        verifier_count: Number of votes cast in the round.
        total_stake: Sum of stakes escrowed in the round.
    """

    verification_id: int
    content_id: str
    status: QueueStatus
    note: str
    timestamp: int
    verifier_count: int
    total_stake: int

    def __post_init__(self) -> None:
        """Validate history fields.

        Raises:
            ValueError: If the id is negative or the status is not an outcome.
        """
        if self.verification_id < 0:
            raise ValueError(
                f"verification_id must be non-negative, got {self.verification_id}"
            )
        if self.status == QueueStatus.PENDING:
            raise ValueError("history status must be an outcome, not pending")
