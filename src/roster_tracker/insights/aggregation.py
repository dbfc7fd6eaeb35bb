"""Pure reductions from member/attendance rows to display-ready summaries.

Every function takes rows already returned by a repository and never touches
the store. Rankings use a total order (count first, then a stable secondary
key) so results are deterministic on ties.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Optional, Sequence

from ..core.constants import DEFAULT_TOP_ATTENDERS
from ..core.enums import AttendanceStatus, Gender


@dataclass(frozen=True)
class Demographics:
    male: int = 0
    female: int = 0
    teenager: int = 0
    adult: int = 0
    # Gender values other than male/female; counted in neither of those.
    unrecognized_gender: int = 0

    def to_dict(self) -> dict:
        return {
            "male": self.male,
            "female": self.female,
            "teenager": self.teenager,
            "adult": self.adult,
            "unrecognized_gender": self.unrecognized_gender,
        }


@dataclass(frozen=True)
class AttendanceTotals:
    present: int = 0
    absent: int = 0
    communion: int = 0

    def to_dict(self) -> dict:
        return {"present": self.present, "absent": self.absent, "communion": self.communion}


@dataclass(frozen=True)
class DailyAttendance:
    day: date
    present: int = 0
    absent: int = 0
    communion: int = 0

    @property
    def label(self) -> str:
        return self.day.strftime("%b %d")

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "label": self.label,
            "present": self.present,
            "absent": self.absent,
            "communion": self.communion,
        }


@dataclass(frozen=True)
class ExtremalAttendance:
    highest: Optional[DailyAttendance] = None
    lowest: Optional[DailyAttendance] = None

    def to_dict(self) -> dict:
        def _one(d: Optional[DailyAttendance]) -> dict:
            if d is None:
                return {"date": None, "count": 0}
            return {"date": d.day.strftime("%Y-%m-%d"), "count": d.present}

        return {"highest": _one(self.highest), "lowest": _one(self.lowest)}


@dataclass(frozen=True)
class TopAttender:
    member_id: int
    name: str
    attendance_count: int

    def to_dict(self) -> dict:
        return {"member_id": self.member_id, "name": self.name, "attendance_count": self.attendance_count}


@dataclass(frozen=True)
class CategoryCount:
    label: str
    count: int

    def to_dict(self) -> dict:
        return {"tag": self.label, "count": self.count}


DEFAULT_CATEGORIES: Sequence[tuple[str, Callable]] = (
    ("Baptized", lambda m: m.is_baptized),
    ("Communion", lambda m: m.has_taken_communion),
    ("Teenager", lambda m: m.is_teenager),
)


def demographics(members: Iterable) -> Demographics:
    male = female = teenager = adult = unrecognized = 0
    for m in members:
        if m.gender == Gender.MALE.value:
            male += 1
        elif m.gender == Gender.FEMALE.value:
            female += 1
        else:
            unrecognized += 1

        if m.is_teenager:
            teenager += 1
        else:
            adult += 1

    return Demographics(male=male, female=female, teenager=teenager, adult=adult, unrecognized_gender=unrecognized)


def attendance_totals(records: Iterable) -> AttendanceTotals:
    present = absent = communion = 0
    for r in records:
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.ABSENT:
            absent += 1
        if r.communion:
            communion += 1
    return AttendanceTotals(present=present, absent=absent, communion=communion)


def _group_by_date(records: Iterable) -> list[DailyAttendance]:
    grouped: dict[date, list] = {}
    for r in records:
        grouped.setdefault(r.attend_date, []).append(r)

    series = []
    for day, rows in grouped.items():
        t = attendance_totals(rows)
        series.append(DailyAttendance(day=day, present=t.present, absent=t.absent, communion=t.communion))
    series.sort(key=lambda d: d.day, reverse=True)
    return series


def daily_attendance_series(records: Iterable, start: date, end: date) -> list[DailyAttendance]:
    """One summary per date in [start, end] that has rows, newest first.

    Dates without any rows are omitted rather than reported as zero.
    """

    return _group_by_date(r for r in records if start <= r.attend_date <= end)


def present_counts_by_date(records: Iterable) -> list[DailyAttendance]:
    return _group_by_date(records)


def extremal_attendance(series: Sequence[DailyAttendance]) -> ExtremalAttendance:
    """Dates with the highest and lowest present-count.

    Ties resolve to the earliest date in both directions.
    """

    if not series:
        return ExtremalAttendance()
    highest = min(series, key=lambda d: (-d.present, d.day))
    lowest = min(series, key=lambda d: (d.present, d.day))
    return ExtremalAttendance(highest=highest, lowest=lowest)


def top_attenders(members: Iterable, records: Iterable, limit: int = DEFAULT_TOP_ATTENDERS) -> list[TopAttender]:
    if limit <= 0:
        return []

    counts: dict[int, int] = {}
    for r in records:
        if r.status == AttendanceStatus.PRESENT:
            counts[r.member_id] = counts.get(r.member_id, 0) + 1

    ranked = [
        TopAttender(member_id=m.member_id, name=m.name, attendance_count=counts.get(m.member_id, 0))
        for m in members
    ]
    ranked.sort(key=lambda t: (-t.attendance_count, t.name, t.member_id))
    return ranked[:limit]


def category_counts(members: Iterable, predicates: Sequence[tuple[str, Callable]] = DEFAULT_CATEGORIES) -> list[CategoryCount]:
    members = list(members)
    return [CategoryCount(label=label, count=sum(1 for m in members if pred(m))) for label, pred in predicates]
