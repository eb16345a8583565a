"""Escrow port.

Custody of staked value is external to the engine. A vote is only
recorded after its stake has been transferred into the engine's custody
account.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class EscrowProtocol(Protocol):
    """Protocol for moving stake between accounts."""

    @abstractmethod
    async def transfer(self, amount: int, sender: str, recipient: str) -> None:
        """Transfer ``amount`` from ``sender`` to ``recipient``.

        Args:
            amount: Quantity to move.
            sender: Paying account.
            recipient: Receiving account.

        Raises:
            EscrowTransferError: If the transfer fails. The failure is
                propagated unchanged by the vote ledger.
        """
        ...
