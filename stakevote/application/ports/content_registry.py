"""Content registry port.

The registry owns content registration and visibility. The verification
engine asks it whether content exists before queueing, and tells it the
outcome of each finalization and upheld dispute.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class ContentRegistryProtocol(Protocol):
    """Protocol for the external content registry."""

    @abstractmethod
    async def is_registered(self, content_id: str) -> bool:
        """Check whether the registry knows this content.

        Args:
            content_id: The content identifier.

        Returns:
            True if the content is registered.
        """
        ...

    @abstractmethod
    async def update_status(self, content_id: str, status: str, visible: bool) -> None:
        """Record a new verification status and visibility for content.

        Args:
            content_id: The content identifier.
            status: "verified", "rejected" or "pending".
            visible: Whether the content should be publicly visible.

        Raises:
            RegistryUpdateError: If the registry refuses the update. The
                calling operation MUST abort without committing.
        """
        ...
