from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member, MemberPayload, RosterEntry


class MemberRepository(Protocol):
    """Repository interface for the ``members`` table.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Member]:
        """All members ordered by name."""

        raise NotImplementedError

    def list_roster(self) -> Sequence[RosterEntry]:
        raise NotImplementedError

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def create(self, payload: MemberPayload) -> int:
        raise NotImplementedError

    def create_many(self, payloads: Sequence[MemberPayload]) -> int:
        """Insert all payloads as one batch; either every row is written or none."""

        raise NotImplementedError

    def update(self, member_id: int, payload: MemberPayload) -> bool:
        raise NotImplementedError

    def delete_by_id(self, member_id: int) -> bool:
        """Delete a member; its attendance rows are removed with it."""

        raise NotImplementedError
