from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        member_id=int(r["member_id"]),
        attend_date=normalize_mysql_date(r["date"]),
        status=AttendanceStatus(r["status"]),
        communion=bool(r.get("communion")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, attend_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT member_id, `date`, status, communion
                FROM attendance
                WHERE `date`=%s
                """,
                (attend_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_by_status(self, status: AttendanceStatus) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT member_id, `date`, status, communion
                FROM attendance
                WHERE status=%s
                ORDER BY `date` ASC
                """,
                (status.value,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT member_id, `date`, status, communion
                FROM attendance
                WHERE `date` BETWEEN %s AND %s
                ORDER BY `date` DESC
                """,
                (start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_dates_with_status(self, status: AttendanceStatus) -> Sequence[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT DISTINCT `date` FROM attendance WHERE status=%s ORDER BY `date` ASC",
                (status.value,),
            )
            return [normalize_mysql_date(r["date"]) for r in fetchall(cur)]

    def get_for_member_and_date(self, member_id: int, attend_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT member_id, `date`, status, communion
                FROM attendance
                WHERE member_id=%s AND `date`=%s
                """,
                (int(member_id), attend_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(member_id, `date`, status, communion)
                VALUES(%s,%s,%s,%s)
                """,
                (record.member_id, record.attend_date, record.status.value, int(record.communion)),
            )

    def update(self, record: AttendanceRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET status=%s, communion=%s
                WHERE member_id=%s AND `date`=%s
                """,
                (record.status.value, int(record.communion), record.member_id, record.attend_date),
            )
            if cur.rowcount > 0:
                return True
            cur.execute(
                "SELECT member_id FROM attendance WHERE member_id=%s AND `date`=%s",
                (record.member_id, record.attend_date),
            )
            return fetchone(cur) is not None
