"""Dispute record domain model.

A dispute is keyed by (content, disputer). It is created against verified
content and resolved at most once. Raising a new dispute for the same key
replaces the stored record.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, eq=True)
class DisputeRecord:
    """A participant's challenge against verified content.

    Attributes:
        content_id: The disputed content.
        disputer_id: The participant who raised the dispute.
        note: The disputer's explanation.
        timestamp: Height at which the dispute was raised.
        resolved: Whether an authority has resolved the dispute.
    """

    content_id: str
    disputer_id: str
    note: str
    timestamp: int
    resolved: bool = False

    def mark_resolved(self) -> DisputeRecord:
        """Return a resolved copy; note and timestamp are kept."""
        return replace(self, resolved=True)
