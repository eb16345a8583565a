"""Authority port - capability check for finalization and dispute resolution."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class AuthorityProtocol(Protocol):
    """Protocol for deciding whether a caller may act as an authority."""

    @abstractmethod
    async def is_authorized(self, caller_id: str) -> bool:
        """Check whether the caller may finalize rounds and resolve disputes.

        Args:
            caller_id: The participant attempting the operation.

        Returns:
            True if the caller holds authority.
        """
        ...
