"""Domain errors for stakevote.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from StakeVoteError.
"""

from stakevote.domain.errors.verification import (
    AlreadyQueuedError,
    AlreadyVotedError,
    EscrowTransferError,
    InsufficientStakeError,
    InvalidDisputeError,
    InvalidHashError,
    InvalidNoteError,
    InvalidStateTransitionError,
    InvalidThresholdError,
    InvalidVoteError,
    MaxVotersReachedError,
    NotRegisteredError,
    RegistryUpdateError,
    UnauthorizedError,
    VerificationError,
    VerificationErrorKind,
    VotingClosedError,
)

__all__: list[str] = [
    "AlreadyQueuedError",
    "AlreadyVotedError",
    "EscrowTransferError",
    "InsufficientStakeError",
    "InvalidDisputeError",
    "InvalidHashError",
    "InvalidNoteError",
    "InvalidStateTransitionError",
    "InvalidThresholdError",
    "InvalidVoteError",
    "MaxVotersReachedError",
    "NotRegisteredError",
    "RegistryUpdateError",
    "UnauthorizedError",
    "VerificationError",
    "VerificationErrorKind",
    "VotingClosedError",
]
