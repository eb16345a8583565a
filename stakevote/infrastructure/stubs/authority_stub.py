"""Stub implementation of AuthorityProtocol.

Authorizes a fixed set of caller identifiers.
"""

from __future__ import annotations

from collections.abc import Iterable


class AuthorityStub:
    """Allow-list authority check.

    Attributes:
        authorities: Caller identifiers that hold authority.
        checked: Every caller checked, in call order.
    """

    def __init__(self, authorities: Iterable[str] = ()) -> None:
        self.authorities: set[str] = set(authorities)
        self.checked: list[str] = []

    def grant(self, caller_id: str) -> None:
        self.authorities.add(caller_id)

    def revoke(self, caller_id: str) -> None:
        self.authorities.discard(caller_id)

    async def is_authorized(self, caller_id: str) -> bool:
        self.checked.append(caller_id)
        return caller_id in self.authorities
