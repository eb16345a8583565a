"""Manually advanced height clock for deterministic tests."""

from __future__ import annotations

from stakevote.application.ports.height_clock import HeightClockProtocol


class ManualHeightClock(HeightClockProtocol):
    """A clock that only moves when told to.

    Attributes:
        height: Current height.
    """

    def __init__(self, start_height: int = 0) -> None:
        if start_height < 0:
            raise ValueError(f"start_height must be non-negative, got {start_height}")
        self.height = start_height

    def current_height(self) -> int:
        return self.height

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward.

        Args:
            blocks: Height units to advance (non-negative).

        Returns:
            The new height.
        """
        if blocks < 0:
            raise ValueError(f"height cannot move backwards (advance by {blocks})")
        self.height += blocks
        return self.height

    def set_height(self, height: int) -> None:
        """Jump to an absolute height, which must not be lower than the current one."""
        if height < self.height:
            raise ValueError(
                f"height cannot move backwards ({self.height} -> {height})"
            )
        self.height = height
