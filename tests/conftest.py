from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from roster_tracker.attendance.model import AttendanceRecord
from roster_tracker.container import build_services
from roster_tracker.core.enums import AttendanceStatus
from roster_tracker.main import create_app
from roster_tracker.members.model import Member, MemberPayload, RosterEntry

ACCESS_CODE = "test-code"


class InMemoryMembers:
    def __init__(self):
        self._rows: dict[int, Member] = {}
        self._id = 0
        self.batches: list[int] = []
        self.fail_batch = False

    def add(self, **fields) -> Member:
        member_id = self.create(MemberPayload(**fields))
        return self._rows[member_id]

    def list_all(self):
        return sorted(self._rows.values(), key=lambda m: (m.name, m.member_id))

    def list_roster(self):
        return [RosterEntry(member_id=m.member_id, name=m.name, tag=m.tag) for m in self.list_all()]

    def get_by_id(self, member_id: int) -> Optional[Member]:
        return self._rows.get(member_id)

    def create(self, payload: MemberPayload) -> int:
        self._id += 1
        self._rows[self._id] = Member.from_payload(self._id, payload)
        return self._id

    def create_many(self, payloads) -> int:
        self.batches.append(len(payloads))
        if self.fail_batch:
            raise RuntimeError("insert failed")
        for p in payloads:
            self.create(p)
        return len(payloads)

    def update(self, member_id: int, payload: MemberPayload) -> bool:
        if member_id not in self._rows:
            return False
        self._rows[member_id] = Member.from_payload(member_id, payload)
        return True

    def delete_by_id(self, member_id: int) -> bool:
        return self._rows.pop(member_id, None) is not None


class InMemoryAttendance:
    def __init__(self):
        self._by_member_date: dict[tuple[int, date], AttendanceRecord] = {}

    def add(self, member_id: int, attend_date: date, status: AttendanceStatus, communion: bool = False):
        self.create(AttendanceRecord(member_id=member_id, attend_date=attend_date, status=status, communion=communion))

    def list_for_date(self, attend_date: date):
        return [r for r in self._by_member_date.values() if r.attend_date == attend_date]

    def list_by_status(self, status: AttendanceStatus):
        items = [r for r in self._by_member_date.values() if r.status == status]
        items.sort(key=lambda r: r.attend_date)
        return items

    def list_between(self, *, start_date: date, end_date: date):
        items = [r for r in self._by_member_date.values() if start_date <= r.attend_date <= end_date]
        items.sort(key=lambda r: r.attend_date, reverse=True)
        return items

    def list_dates_with_status(self, status: AttendanceStatus):
        return sorted({r.attend_date for r in self._by_member_date.values() if r.status == status})

    def get_for_member_and_date(self, member_id: int, attend_date: date) -> Optional[AttendanceRecord]:
        return self._by_member_date.get((member_id, attend_date))

    def create(self, record: AttendanceRecord) -> None:
        key = (record.member_id, record.attend_date)
        if key in self._by_member_date:
            raise RuntimeError("duplicate key")
        self._by_member_date[key] = record

    def update(self, record: AttendanceRecord) -> bool:
        key = (record.member_id, record.attend_date)
        if key not in self._by_member_date:
            return False
        self._by_member_date[key] = record
        return True


@pytest.fixture
def members_repo():
    return InMemoryMembers()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(members_repo, attendance_repo):
    return build_services(
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        access_code=ACCESS_CODE,
        top_limit=5,
        window_days=7,
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    c = app.test_client()
    resp = c.post("/login", json={"access_code": ACCESS_CODE})
    assert resp.status_code == 200
    return c
