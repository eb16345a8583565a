"""Stub implementation of ContentRegistryProtocol for testing.

This stub tracks registered content and captures every status update
for test assertions. It can be configured to reject updates to exercise
the engine's rollback paths.

Usage in tests:
    registry = ContentRegistryStub(registered={"hash1"})
    engine = build_engine(registry=registry)

    await engine.enqueue("hash1")
    ...
    assert registry.status_updates[-1].status == "verified"

    registry.fail_updates = True
    result = await engine.finalize("hash1", "deployer", "note")
    assert result.error_kind is VerificationErrorKind.REGISTRY_UPDATE_FAILED
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from stakevote.domain.errors import RegistryUpdateError


@dataclass(frozen=True)
class StatusUpdate:
    """Record of a status update sent to the registry.

    Attributes:
        content_id: The content updated.
        status: The status string sent.
        visible: The visibility flag sent.
    """

    content_id: str
    status: str
    visible: bool


class ContentRegistryStub:
    """In-memory content registry.

    Attributes:
        registered: Content identifiers the registry knows.
        accept_all: If True, every identifier counts as registered.
        status_updates: Every successful update, in call order.
        fail_updates: If True, update_status raises RegistryUpdateError.
    """

    def __init__(
        self,
        registered: Iterable[str] = (),
        accept_all: bool = False,
    ) -> None:
        self.registered: set[str] = set(registered)
        self.accept_all = accept_all
        self.status_updates: list[StatusUpdate] = []
        self.fail_updates = False
        self._current: dict[str, StatusUpdate] = {}

    def register(self, content_id: str) -> None:
        """Mark content as registered.

        Call this in tests before enqueueing the content.
        """
        self.registered.add(content_id)

    async def is_registered(self, content_id: str) -> bool:
        return self.accept_all or content_id in self.registered

    async def update_status(self, content_id: str, status: str, visible: bool) -> None:
        """Capture the update.

        Raises:
            RegistryUpdateError: If fail_updates is True.
        """
        if self.fail_updates:
            raise RegistryUpdateError(content_id, status, "simulated registry failure")
        update = StatusUpdate(content_id=content_id, status=status, visible=visible)
        self.status_updates.append(update)
        self._current[content_id] = update

    def current_status(self, content_id: str) -> StatusUpdate | None:
        """Return the latest update for a content, or None."""
        return self._current.get(content_id)
