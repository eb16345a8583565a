"""Height clock port.

All timing decisions in the verification engine compare logical heights
(block height or equivalent), never wall-clock time. Services MUST inject
a HeightClockProtocol implementation rather than keeping their own counter.
"""

from abc import ABC, abstractmethod


class HeightClockProtocol(ABC):
    """Abstract interface for the logical clock.

    For testing:
        Use ManualHeightClock from stakevote/infrastructure/stubs/
    """

    @abstractmethod
    def current_height(self) -> int:
        """Return the current height.

        Returns:
            Non-negative height; never decreases between calls.
        """
        ...
