from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Member, MemberPayload, RosterEntry
from .repository import MemberRepository

_COLUMNS = "id, name, birthday, phone, email, tag, gender, `isTeenager`, `isBaptized`, `hasTakenCommunion`"


def _to_member(r: dict) -> Member:
    return Member(
        member_id=int(r["id"]),
        name=r["name"],
        birthday=normalize_mysql_date(r.get("birthday")),
        phone=r.get("phone"),
        email=r.get("email"),
        tag=r.get("tag"),
        gender=r.get("gender") or Gender.MALE.value,
        is_teenager=bool(r.get("isTeenager")),
        is_baptized=bool(r.get("isBaptized")),
        has_taken_communion=bool(r.get("hasTakenCommunion")),
    )


def _params(payload: MemberPayload) -> tuple:
    return (
        payload.name,
        payload.birthday,
        payload.phone,
        payload.email,
        payload.tag,
        payload.gender,
        int(payload.is_teenager),
        int(payload.is_baptized),
        int(payload.has_taken_communion),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members ORDER BY name ASC, id ASC")
            return [_to_member(r) for r in fetchall(cur)]

    def list_roster(self) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, tag FROM members ORDER BY name ASC, id ASC")
            return [
                RosterEntry(member_id=int(r["id"]), name=r["name"], tag=r.get("tag"))
                for r in fetchall(cur)
            ]

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE id=%s", (int(member_id),))
            r = fetchone(cur)
            return _to_member(r) if r else None

    def create(self, payload: MemberPayload) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO members(name, birthday, phone, email, tag, gender,
                                    `isTeenager`, `isBaptized`, `hasTakenCommunion`)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(payload),
            )
            return int(cur.lastrowid)

    def create_many(self, payloads: Sequence[MemberPayload]) -> int:
        if not payloads:
            return 0
        # One connection, one commit: db_cursor rolls the whole batch back on error.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO members(name, birthday, phone, email, tag, gender,
                                    `isTeenager`, `isBaptized`, `hasTakenCommunion`)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                [_params(p) for p in payloads],
            )
            return len(payloads)

    def update(self, member_id: int, payload: MemberPayload) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE members
                SET name=%s, birthday=%s, phone=%s, email=%s, tag=%s, gender=%s,
                    `isTeenager`=%s, `isBaptized`=%s, `hasTakenCommunion`=%s
                WHERE id=%s
                """,
                _params(payload) + (int(member_id),),
            )
            if cur.rowcount > 0:
                return True
            # MySQL reports 0 affected rows when nothing changed; tell that apart from a missing id.
            cur.execute("SELECT id FROM members WHERE id=%s", (int(member_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, member_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE id=%s", (int(member_id),))
            return cur.rowcount > 0
