"""Stub implementation of VerificationEventEmitterPort for testing.

This stub captures emitted events for test assertions.

Usage in tests:
    emitter = VerificationEventEmitterStub()
    engine = build_engine(event_emitter=emitter)

    await engine.enqueue("hash1")

    assert emitter.event_types() == ["content.queued"]
"""

from __future__ import annotations

from stakevote.domain.events.verification import VerificationEvent


class VerificationEventEmitterStub:
    """Captures events in memory.

    Attributes:
        emitted_events: All emitted events in order.
        should_fail: If True, emit raises RuntimeError.
        fail_exception: If set, emit raises this exception.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty state."""
        self.emitted_events: list[VerificationEvent] = []
        self.should_fail: bool = False
        self.fail_exception: Exception | None = None

    async def emit(self, event: VerificationEvent) -> None:
        """Capture an event.

        Raises:
            Exception: If fail_exception is set or should_fail is True.
        """
        if self.fail_exception is not None:
            raise self.fail_exception
        if self.should_fail:
            raise RuntimeError("Simulated verification event emission failure")
        self.emitted_events.append(event)

    def event_types(self) -> list[str]:
        return [event.event_type for event in self.emitted_events]

    def reset(self) -> None:
        """Clear captured events and failure configuration."""
        self.emitted_events.clear()
        self.should_fail = False
        self.fail_exception = None
