"""Configuration module for stakevote.

Available Configurations:
- VerificationConfig: Voting policy constants (voter cap, stake floor,
  voting window, note caps, approval threshold)
"""

from stakevote.config.verification_config import (
    DEFAULT_VERIFICATION_CONFIG,
    TEST_VERIFICATION_CONFIG,
    VerificationConfig,
)

__all__ = [
    "VerificationConfig",
    "DEFAULT_VERIFICATION_CONFIG",
    "TEST_VERIFICATION_CONFIG",
]
