"""
stakevote - Stake-Weighted Community Content Verification

Decides whether submitted content is verified or rejected by collecting
bounded sets of staked votes, tallying them against a quorum-free
percentage threshold, and keeping an append-only history of every
finalization and dispute.

Guarantees:
- No double voting
- No premature finalization
- Bounded voter sets
- Replay-safe dispute resolution
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
