"""Stub implementation of EscrowProtocol for testing.

Records every transfer and optionally enforces account balances.
Configure ``fail_transfers`` to simulate custody failures.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from stakevote.domain.errors import EscrowTransferError


@dataclass(frozen=True)
class Transfer:
    """Record of a completed transfer."""

    amount: int
    sender: str
    recipient: str


class EscrowStub:
    """In-memory escrow.

    When ``balances`` is given, senders must hold enough funds; otherwise
    every transfer succeeds unless ``fail_transfers`` is set.

    Attributes:
        transfers: Completed transfers in call order.
        fail_transfers: If True, transfer raises EscrowTransferError.
    """

    def __init__(self, balances: dict[str, int] | None = None) -> None:
        self._enforce_balances = balances is not None
        self._balances: defaultdict[str, int] = defaultdict(int, balances or {})
        self.transfers: list[Transfer] = []
        self.fail_transfers = False

    async def transfer(self, amount: int, sender: str, recipient: str) -> None:
        """Move funds between accounts.

        Raises:
            EscrowTransferError: On simulated failure or insufficient funds.
        """
        if self.fail_transfers:
            raise EscrowTransferError(
                amount, sender, recipient, "simulated escrow failure"
            )
        if self._enforce_balances and self._balances[sender] < amount:
            raise EscrowTransferError(amount, sender, recipient, "insufficient funds")

        self._balances[sender] -= amount
        self._balances[recipient] += amount
        self.transfers.append(Transfer(amount=amount, sender=sender, recipient=recipient))

    def balance_of(self, account: str) -> int:
        return self._balances[account]

    def total_received(self, recipient: str) -> int:
        """Sum of all transfers into ``recipient``."""
        return sum(t.amount for t in self.transfers if t.recipient == recipient)
