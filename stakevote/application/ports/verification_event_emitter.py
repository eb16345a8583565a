"""Verification event emitter port.

Events are emitted after a mutation has been committed. Emission failures
are logged by the caller and never undo the committed operation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stakevote.domain.events.verification import VerificationEvent


class VerificationEventEmitterPort(Protocol):
    """Protocol for publishing verification audit events."""

    async def emit(self, event: VerificationEvent) -> None:
        """Publish one event.

        Raises:
            Exception: Any transport failure; callers log and continue.
        """
        ...
