"""Content verification policy configuration.

This module defines the fixed policy values of the verification engine
with environment variable overrides for deployment tuning.

Environment Variables:
- STAKEVOTE_MAX_VOTERS: Maximum voters per queue entry (default: 50)
- STAKEVOTE_MIN_STAKE: Minimum stake per vote (default: 1000)
- STAKEVOTE_VOTING_PERIOD: Voting window length in height units (default: 1440)
- STAKEVOTE_MAX_DISPUTE_NOTE_LEN: Maximum dispute note length (default: 200)
- STAKEVOTE_MAX_VERIFICATION_NOTE_LEN: Maximum finalization/resolution
  note length (default: 200)
- STAKEVOTE_VERIFICATION_THRESHOLD: Approval percentage (default: 70)
- STAKEVOTE_CUSTODY_ACCOUNT: Account receiving escrowed stakes
  (default: "stakevote-custody")
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CUSTODY_ACCOUNT = "stakevote-custody"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class VerificationConfig:
    """Policy values for the verification engine.

    Attributes:
        max_voters: Maximum distinct voters per queue entry.
        min_stake: Minimum stake a single vote must escrow.
        voting_period: Voting window length in height units.
        max_dispute_note_len: Maximum length of a dispute note.
        max_verification_note_len: Maximum length of a finalization or
            dispute resolution note.
        verification_threshold: Integer approval percentage a round must
            reach (inclusive) to be verified.
        custody_account: Recipient of escrowed stakes.
    """

    max_voters: int = 50
    min_stake: int = 1000
    voting_period: int = 1440
    max_dispute_note_len: int = 200
    max_verification_note_len: int = 200
    verification_threshold: int = 70
    custody_account: str = DEFAULT_CUSTODY_ACCOUNT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_voters < 1:
            raise ValueError(f"max_voters must be positive, got {self.max_voters}")
        if self.min_stake < 0:
            raise ValueError(f"min_stake must be non-negative, got {self.min_stake}")
        if self.voting_period < 1:
            raise ValueError(
                f"voting_period must be positive, got {self.voting_period}"
            )
        if self.max_dispute_note_len < 0:
            raise ValueError(
                f"max_dispute_note_len must be non-negative, got {self.max_dispute_note_len}"
            )
        if self.max_verification_note_len < 0:
            raise ValueError(
                "max_verification_note_len must be non-negative, "
                f"got {self.max_verification_note_len}"
            )
        if not 1 <= self.verification_threshold <= 100:
            raise ValueError(
                "verification_threshold must be between 1 and 100, "
                f"got {self.verification_threshold}"
            )
        if not self.custody_account:
            raise ValueError("custody_account must not be empty")

    @classmethod
    def from_environment(cls) -> "VerificationConfig":
        """Create config from environment variables with defaults.

        Returns:
            VerificationConfig with values from environment or defaults.
        """
        return cls(
            max_voters=_get_int_env("STAKEVOTE_MAX_VOTERS", 50),
            min_stake=_get_int_env("STAKEVOTE_MIN_STAKE", 1000),
            voting_period=_get_int_env("STAKEVOTE_VOTING_PERIOD", 1440),
            max_dispute_note_len=_get_int_env("STAKEVOTE_MAX_DISPUTE_NOTE_LEN", 200),
            max_verification_note_len=_get_int_env(
                "STAKEVOTE_MAX_VERIFICATION_NOTE_LEN", 200
            ),
            verification_threshold=_get_int_env(
                "STAKEVOTE_VERIFICATION_THRESHOLD", 70
            ),
            custody_account=os.environ.get(
                "STAKEVOTE_CUSTODY_ACCOUNT", DEFAULT_CUSTODY_ACCOUNT
            )
            or DEFAULT_CUSTODY_ACCOUNT,
        )


# Default production config
DEFAULT_VERIFICATION_CONFIG = VerificationConfig()

# Testing config with a short window and small voter cap
TEST_VERIFICATION_CONFIG = VerificationConfig(
    max_voters=3,
    min_stake=10,
    voting_period=10,
    max_dispute_note_len=20,
    max_verification_note_len=20,
)
