"""Verification queue entry domain model.

A QueueEntry holds the voting progress and status of one piece of content.
It is created once per content identifier, replaced on every vote or
status change, and never deleted.

State Machine:
    PENDING -> VERIFIED (finalization, approval at or above threshold)
    PENDING -> REJECTED (finalization, below threshold or no votes)
    VERIFIED -> PENDING (upheld dispute)

REJECTED is terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from stakevote.domain.errors import InvalidStateTransitionError


class QueueStatus(Enum):
    """Status of a queue entry.

    Values are the strings reported to the content registry.
    """

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"

    def is_terminal(self) -> bool:
        """Check if no further transitions are permitted from this status."""
        return not self.valid_transitions()

    def valid_transitions(self) -> frozenset[QueueStatus]:
        """Get valid transitions from this status.

        Returns:
            Frozenset of statuses this status can transition to.
        """
        return STATUS_TRANSITION_MATRIX.get(self, frozenset())


STATUS_TRANSITION_MATRIX: dict[QueueStatus, frozenset[QueueStatus]] = {
    QueueStatus.PENDING: frozenset({QueueStatus.VERIFIED, QueueStatus.REJECTED}),
    QueueStatus.VERIFIED: frozenset({QueueStatus.PENDING}),
    QueueStatus.REJECTED: frozenset(),
}


@dataclass(frozen=True, eq=True)
class QueueEntry:
    """Voting progress and status for one content identifier.

    Attributes:
        content_id: The content being verified.
        status: Current status.
        start_height: Height at which the voting round opened.
        yes_votes: Number of approving votes.
        no_votes: Number of rejecting votes.
        total_stake: Sum of all escrowed stakes.
        voters: Voters in the order their votes were recorded.
    """

    content_id: str
    status: QueueStatus
    start_height: int
    yes_votes: int = 0
    no_votes: int = 0
    total_stake: int = 0
    voters: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate aggregate invariants.

        Raises:
            ValueError: If counters disagree with the voter sequence.
        """
        if self.yes_votes + self.no_votes != len(self.voters):
            raise ValueError(
                f"yes_votes + no_votes ({self.yes_votes + self.no_votes}) "
                f"must equal voter count ({len(self.voters)})"
            )
        if len(set(self.voters)) != len(self.voters):
            raise ValueError("voters must be unique")
        if self.total_stake < 0:
            raise ValueError(f"total_stake must be non-negative, got {self.total_stake}")

    @classmethod
    def open(cls, content_id: str, start_height: int) -> QueueEntry:
        """Create a fresh pending entry with zero counters."""
        return cls(
            content_id=content_id,
            status=QueueStatus.PENDING,
            start_height=start_height,
        )

    @property
    def total_votes(self) -> int:
        """Number of votes cast in this round."""
        return self.yes_votes + self.no_votes

    @property
    def voter_count(self) -> int:
        return len(self.voters)

    def elapsed(self, current_height: int) -> int:
        """Height units elapsed since the round opened."""
        return current_height - self.start_height

    def is_voting_open(self, current_height: int, voting_period: int) -> bool:
        """Check if votes may still be cast.

        Voting is open only while the entry is pending and strictly less
        than ``voting_period`` height units have elapsed.
        """
        return (
            self.status == QueueStatus.PENDING
            and self.elapsed(current_height) < voting_period
        )

    def is_ready_for_finalization(self, current_height: int, voting_period: int) -> bool:
        """Check if the round can be closed.

        True exactly when the entry is pending and voting is no longer open.
        """
        return (
            self.status == QueueStatus.PENDING
            and self.elapsed(current_height) >= voting_period
        )

    def approval_percentage(self) -> int:
        """Integer (truncated) share of approving votes, 0 when nobody voted."""
        if self.total_votes == 0:
            return 0
        return self.yes_votes * 100 // self.total_votes

    def outcome(self, threshold: int) -> QueueStatus:
        """Compute the finalization outcome for this round.

        No votes at all is a rejection. Otherwise the content is verified
        when the truncated approval percentage reaches the threshold.

        Args:
            threshold: Inclusive approval percentage.

        Returns:
            QueueStatus.VERIFIED or QueueStatus.REJECTED.
        """
        if self.total_votes == 0:
            return QueueStatus.REJECTED
        if self.approval_percentage() >= threshold:
            return QueueStatus.VERIFIED
        return QueueStatus.REJECTED

    def with_vote(self, voter: str, vote: bool, stake: int) -> QueueEntry:
        """Return a copy with one more vote applied to the aggregates."""
        return replace(
            self,
            yes_votes=self.yes_votes + (1 if vote else 0),
            no_votes=self.no_votes + (0 if vote else 1),
            total_stake=self.total_stake + stake,
            voters=(*self.voters, voter),
        )

    def with_status(self, new_status: QueueStatus) -> QueueEntry:
        """Return a copy in ``new_status``.

        Start height and vote aggregates are carried over unchanged.

        Raises:
            InvalidStateTransitionError: If the transition is not permitted.
        """
        if new_status not in self.status.valid_transitions():
            raise InvalidStateTransitionError(
                self.content_id, self.status.value, new_status.value
            )
        return replace(self, status=new_status)
