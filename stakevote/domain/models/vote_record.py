"""Vote record domain model.

One VoteRecord exists per (content, voter) pair. Its existence is the
"already voted" guard, and it is never modified after creation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=True)
class VoteRecord:
    """A single staked vote on a piece of content.

    Attributes:
        content_id: The content voted on.
        voter_id: The participant who voted.
        vote: True to approve, False to reject.
        stake: Amount escrowed with this vote.
        timestamp: Height at which the vote was recorded.
    """

    content_id: str
    voter_id: str
    vote: bool
    stake: int
    timestamp: int

    def __post_init__(self) -> None:
        """Validate vote fields.

        Raises:
            ValueError: If stake or timestamp is negative.
        """
        if self.stake < 0:
            raise ValueError(f"stake must be non-negative, got {self.stake}")
        if self.timestamp < 0:
            raise ValueError(f"timestamp must be non-negative, got {self.timestamp}")
