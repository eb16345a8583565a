"""Base service mixins for structured logging and audit event emission.

Usage:
    from stakevote.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, dependency: SomePort) -> None:
            self._dependency = dependency
            self._init_logger()

        async def do_something(self, content_id: str) -> None:
            log = self._log_operation("do_something", content_id=content_id)
            log.info("operation_started")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from stakevote.infrastructure.observability.correlation import get_correlation_id
from stakevote.infrastructure.observability.logging import get_logger_for_service

if TYPE_CHECKING:
    from stakevote.application.ports.verification_event_emitter import (
        VerificationEventEmitterPort,
    )
    from stakevote.domain.events.verification import VerificationEvent


class LoggingMixin:
    """Mixin providing structured, correlated logging for services.

    The logger is bound with the service class name and a component.
    Each operation additionally binds its name and the current
    correlation ID.

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "verification") -> None:
        """Initialize the logger with service name binding.

        Should be called in __init__ after setting up dependencies.
        """
        self._log = get_logger_for_service(self.__class__.__name__, component)

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create an operation-scoped logger with correlation ID.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation and correlation context.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )


async def emit_after_commit(
    emitter: VerificationEventEmitterPort | None,
    event: VerificationEvent,
    log: structlog.BoundLogger,
) -> bool:
    """Emit an audit event for an already committed mutation.

    The mutation stands regardless of the outcome: a failed emission is
    logged with the event's content hash so it can be replayed.

    Args:
        emitter: The event emitter, or None when emission is disabled.
        event: The event payload.
        log: Operation-scoped logger.

    Returns:
        True if the event was emitted, False if disabled or failed.
    """
    if emitter is None:
        return False
    try:
        await emitter.emit(event)
    except Exception as e:
        log.error(
            "verification_event_emission_failed",
            event_type=event.event_type,
            event_hash=event.content_hash(),
            error=str(e),
            error_type=type(e).__name__,
        )
        return False
    log.debug(
        "verification_event_emitted",
        event_type=event.event_type,
        event_hash=event.content_hash()[:16] + "...",
    )
    return True
