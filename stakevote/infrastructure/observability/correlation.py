"""Correlation ID management for tracing engine operations.

Correlation IDs live in a ContextVar so they survive await points within
a single task. The engine facade opens a correlation scope per operation
unless the caller already set one.

Usage:
    set_correlation_id(request_correlation_id)
    log = structlog.get_logger().bind(correlation_id=get_correlation_id())
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4 string)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the current correlation ID, or an empty string if none is set."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current context."""
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope() -> Iterator[str]:
    """Run a block under a correlation ID.

    Keeps the caller's ID when one is set. Otherwise a fresh ID is set for
    the block and the previous value is restored on exit, so consecutive
    scopes in the same context never share an ID.

    Yields:
        The correlation ID in effect inside the block.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        yield correlation_id
        return
    correlation_id = generate_correlation_id()
    token = _correlation_id.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id to every log entry.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with correlation_id added when one is set.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
