from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_INSIGHTS_DAYS, DEFAULT_TOP_ATTENDERS
from ..core.enums import AttendanceStatus
from ..members.repository import MemberRepository
from .aggregation import (
    Demographics,
    ExtremalAttendance,
    category_counts,
    daily_attendance_series,
    demographics,
    extremal_attendance,
    present_counts_by_date,
    top_attenders,
)


@dataclass(frozen=True)
class DashboardStats:
    total_members: int
    demographics: Demographics
    extremal: ExtremalAttendance

    def to_dict(self) -> dict:
        return {
            "total_members": self.total_members,
            "demographics": self.demographics.to_dict(),
            "attendance": self.extremal.to_dict(),
        }


class InsightsService:
    """Read-only statistics for the dashboard and insights screens."""

    def __init__(
        self,
        members: MemberRepository,
        attendance: AttendanceRepository,
        *,
        top_limit: int = DEFAULT_TOP_ATTENDERS,
        window_days: int = DEFAULT_INSIGHTS_DAYS,
    ):
        self._members = members
        self._attendance = attendance
        self._top_limit = int(top_limit)
        self._window_days = int(window_days)

    def dashboard_stats(self) -> DashboardStats:
        members = list(self._members.list_all())
        present = self._attendance.list_by_status(AttendanceStatus.PRESENT)
        return DashboardStats(
            total_members=len(members),
            demographics=demographics(members),
            extremal=extremal_attendance(present_counts_by_date(present)),
        )

    def weekly_attendance(self, *, today: Optional[date] = None, days: Optional[int] = None):
        end = today or today_local()
        start = end - timedelta(days=self._window_days if days is None else int(days))
        rows = self._attendance.list_between(start_date=start, end_date=end)
        return daily_attendance_series(rows, start, end)

    def demographics(self) -> Demographics:
        return demographics(self._members.list_all())

    def top_attenders(self, limit: Optional[int] = None):
        members = self._members.list_roster()
        present = self._attendance.list_by_status(AttendanceStatus.PRESENT)
        return top_attenders(members, present, self._top_limit if limit is None else int(limit))

    def category_counts(self):
        return category_counts(self._members.list_all())
