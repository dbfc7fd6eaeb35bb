from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..insights.aggregation import AttendanceTotals, attendance_totals
from ..members.model import RosterEntry
from ..members.repository import MemberRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceSheet:
    """Everything the attendance screen shows for one date."""

    day: date
    members: list[RosterEntry]
    records: dict[int, AttendanceRecord]
    totals: AttendanceTotals
    is_marked: bool

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "members": [m.to_dict() for m in self.members],
            "attendance": {str(k): v.to_dict() for k, v in self.records.items()},
            "totals": self.totals.to_dict(),
            "is_marked": self.is_marked,
        }


def parse_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError("Status must be 'present' or 'absent'")


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, members: MemberRepository):
        self._attendance = attendance
        self._members = members

    def get_sheet(self, day: date) -> AttendanceSheet:
        roster = list(self._members.list_roster())
        records = {r.member_id: r for r in self._attendance.list_for_date(day)}
        totals = attendance_totals(records.values())
        return AttendanceSheet(
            day=day,
            members=roster,
            records=records,
            totals=totals,
            is_marked=totals.present > 0,
        )

    def marked_dates(self) -> list[date]:
        return list(self._attendance.list_dates_with_status(AttendanceStatus.PRESENT))

    def set_status(self, member_id: int, day: date, status) -> AttendanceRecord:
        status = parse_status(status)
        return self._upsert(int(member_id), day, status=status)

    def set_communion(self, member_id: int, day: date, communion: bool) -> AttendanceRecord:
        return self._upsert(int(member_id), day, communion=bool(communion))

    def _upsert(self, member_id: int, day: date, **changes) -> AttendanceRecord:
        """Create or update the (member, date) record, changing only the given field.

        A new record takes status=absent / communion=False for the field not
        being set. Returns the record exactly as written.
        """

        if self._members.get_by_id(member_id) is None:
            raise ValidationError("Member does not exist")

        existing = self._attendance.get_for_member_and_date(member_id, day)
        if existing is not None:
            record = replace(existing, **changes)
            if self._attendance.update(record):
                logger.debug("Updated attendance %s on %s: %s", member_id, day, changes)
                return record

        record = AttendanceRecord(
            member_id=member_id,
            attend_date=day,
            status=changes.get("status", AttendanceStatus.ABSENT),
            communion=changes.get("communion", False),
        )
        self._attendance.create(record)
        logger.debug("Created attendance %s on %s: %s", member_id, day, changes)
        return record
