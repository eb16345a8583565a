"""Content verification domain errors.

This module provides the exception classes raised by the verification
services. Every error carries a stable kind and numeric code so that the
engine facade can turn it into a typed OperationResult without losing
information.

Codes:
    100 Unauthorized        104 InsufficientStake   108 MaxVotersReached
    101 InvalidHash         105 InvalidVote         109 InvalidThreshold
    102 AlreadyVerified     106 InvalidDispute      110 AlreadyVoted
    103 VotingClosed        107 NotRegistered       111 EscrowFailed
                                                    112 RegistryUpdateFailed
"""

from __future__ import annotations

from enum import Enum

from stakevote.domain.exceptions import StakeVoteError


class VerificationErrorKind(Enum):
    """Kind of verification failure, valued by its numeric code."""

    UNAUTHORIZED = 100
    INVALID_HASH = 101
    ALREADY_VERIFIED = 102
    VOTING_CLOSED = 103
    INSUFFICIENT_STAKE = 104
    INVALID_VOTE = 105
    INVALID_DISPUTE = 106
    NOT_REGISTERED = 107
    MAX_VOTERS_REACHED = 108
    INVALID_THRESHOLD = 109
    ALREADY_VOTED = 110
    ESCROW_FAILED = 111
    REGISTRY_UPDATE_FAILED = 112

    @property
    def code(self) -> int:
        """Numeric error code."""
        return self.value


class VerificationError(StakeVoteError):
    """Base error for all content verification operations.

    Subclasses set ``kind``; ``code`` is derived from it.

    Attributes:
        content_id: The content the failing operation targeted, if any.
    """

    kind: VerificationErrorKind = VerificationErrorKind.INVALID_DISPUTE

    def __init__(self, message: str, content_id: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error description.
            content_id: The content the operation targeted, if any.
        """
        self.content_id = content_id
        super().__init__(message)

    @property
    def code(self) -> int:
        """Numeric error code for this error's kind."""
        return self.kind.code

    def to_problem_dict(self) -> dict:
        """Serialize to a problem-details style dictionary.

        Returns:
            Dictionary with kind, code, detail and the target content.
        """
        result: dict = {
            "type": f"urn:stakevote:verification:{self.kind.name.lower()}",
            "kind": self.kind.name,
            "code": self.code,
            "detail": str(self),
        }
        if self.content_id is not None:
            result["content_id"] = self.content_id
        return result


class UnauthorizedError(VerificationError):
    """Raised when a caller fails the authority check."""

    kind = VerificationErrorKind.UNAUTHORIZED

    def __init__(self, caller_id: str, content_id: str | None = None) -> None:
        self.caller_id = caller_id
        super().__init__(
            f"Caller {caller_id} is not authorized for this operation",
            content_id=content_id,
        )


class InvalidHashError(VerificationError):
    """Reserved for malformed content identifiers.

    Content identifiers are opaque to the engine, so no current check
    raises this error. It exists to keep the code table complete.
    """

    kind = VerificationErrorKind.INVALID_HASH

    def __init__(self, content_id: str) -> None:
        super().__init__(f"Malformed content identifier: {content_id!r}", content_id)


class AlreadyQueuedError(VerificationError):
    """Raised when content is enqueued a second time."""

    kind = VerificationErrorKind.ALREADY_VERIFIED

    def __init__(self, content_id: str) -> None:
        super().__init__(
            f"Content {content_id} is already in the verification queue", content_id
        )


class VotingClosedError(VerificationError):
    """Raised when the voting window does not permit the operation.

    The same kind covers two directions: voting after the window has
    elapsed, and finalizing before it has.

    Attributes:
        start_height: Height at which the voting round started.
        current_height: Height at which the operation was attempted.
    """

    kind = VerificationErrorKind.VOTING_CLOSED

    def __init__(
        self,
        content_id: str,
        reason: str,
        start_height: int | None = None,
        current_height: int | None = None,
    ) -> None:
        self.reason = reason
        self.start_height = start_height
        self.current_height = current_height
        super().__init__(f"Content {content_id}: {reason}", content_id)


class InsufficientStakeError(VerificationError):
    """Raised when a vote's stake is below the minimum."""

    kind = VerificationErrorKind.INSUFFICIENT_STAKE

    def __init__(self, content_id: str, stake: int, min_stake: int) -> None:
        self.stake = stake
        self.min_stake = min_stake
        super().__init__(
            f"Stake {stake} is below the minimum of {min_stake}", content_id
        )


class InvalidVoteError(VerificationError):
    """Reserved for out-of-domain vote values.

    Votes are booleans, so no current check raises this error.
    """

    kind = VerificationErrorKind.INVALID_VOTE

    def __init__(self, content_id: str, vote: object) -> None:
        super().__init__(f"Invalid vote value: {vote!r}", content_id)


class InvalidDisputeError(VerificationError):
    """Raised for any dispute failure.

    Covers raising a dispute on content that is not verified, an oversized
    note, and resolving a dispute that is missing or already resolved.
    """

    kind = VerificationErrorKind.INVALID_DISPUTE

    def __init__(self, content_id: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid dispute on {content_id}: {reason}", content_id)


class InvalidNoteError(InvalidDisputeError):
    """Raised when a finalization or resolution note exceeds its length cap.

    Shares the InvalidDispute kind and code.
    """

    def __init__(self, content_id: str, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            content_id,
            f"note length {length} exceeds maximum of {max_length}",
        )


class NotRegisteredError(VerificationError):
    """Raised when content is unknown to the registry or the queue."""

    kind = VerificationErrorKind.NOT_REGISTERED

    def __init__(self, content_id: str, reason: str = "content is not registered") -> None:
        super().__init__(f"Content {content_id}: {reason}", content_id)


class MaxVotersReachedError(VerificationError):
    """Raised when a queue entry already holds the maximum number of voters."""

    kind = VerificationErrorKind.MAX_VOTERS_REACHED

    def __init__(self, content_id: str, max_voters: int) -> None:
        self.max_voters = max_voters
        super().__init__(
            f"Content {content_id} already has {max_voters} voters", content_id
        )


class InvalidThresholdError(VerificationError):
    """Reserved for invalid approval thresholds.

    Threshold validation happens in configuration, so no engine check
    raises this error.
    """

    kind = VerificationErrorKind.INVALID_THRESHOLD

    def __init__(self, threshold: int) -> None:
        self.threshold = threshold
        super().__init__(f"Invalid verification threshold: {threshold}")


class AlreadyVotedError(VerificationError):
    """Raised when a voter votes twice on the same content.

    Attributes:
        voter_id: The voter attempting the duplicate vote.
        voted_at: Height of the existing vote, if known.
    """

    kind = VerificationErrorKind.ALREADY_VOTED

    def __init__(
        self, content_id: str, voter_id: str, voted_at: int | None = None
    ) -> None:
        self.voter_id = voter_id
        self.voted_at = voted_at
        super().__init__(
            f"Voter {voter_id} already voted on content {content_id}", content_id
        )


class EscrowTransferError(VerificationError):
    """Raised by an escrow adapter when a stake transfer fails."""

    kind = VerificationErrorKind.ESCROW_FAILED

    def __init__(
        self,
        amount: int,
        sender: str,
        recipient: str,
        reason: str = "transfer rejected",
    ) -> None:
        self.amount = amount
        self.sender = sender
        self.recipient = recipient
        self.reason = reason
        super().__init__(
            f"Escrow transfer of {amount} from {sender} to {recipient} failed: {reason}"
        )


class RegistryUpdateError(VerificationError):
    """Raised by a registry adapter when a status update fails."""

    kind = VerificationErrorKind.REGISTRY_UPDATE_FAILED

    def __init__(self, content_id: str, status: str, reason: str = "update rejected") -> None:
        self.status = status
        self.reason = reason
        super().__init__(
            f"Registry update of {content_id} to {status} failed: {reason}",
            content_id,
        )


class InvalidStateTransitionError(StakeVoteError):
    """Raised when a queue entry is asked to make a forbidden transition.

    This is an internal guard: services check status before transitioning,
    so reaching it indicates a programming error. It is not a
    VerificationError and is never folded into an OperationResult.
    """

    def __init__(self, content_id: str, from_status: str, to_status: str) -> None:
        self.content_id = content_id
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            f"Queue entry {content_id} cannot transition {from_status} -> {to_status}"
        )
