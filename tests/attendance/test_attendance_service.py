from __future__ import annotations

from datetime import date

import pytest

from roster_tracker.attendance.service import AttendanceService, parse_status
from roster_tracker.core.enums import AttendanceStatus
from roster_tracker.core.exceptions import ValidationError

DAY = date(2024, 6, 2)


@pytest.fixture
def svc(attendance_repo, members_repo):
    return AttendanceService(attendance_repo, members_repo)


def test_first_status_mark_creates_record_without_communion(svc, members_repo, attendance_repo):
    m = members_repo.add(name="Ann", gender="female")

    record = svc.set_status(m.member_id, DAY, "present")

    assert record.status == AttendanceStatus.PRESENT
    assert record.communion is False
    assert attendance_repo.get_for_member_and_date(m.member_id, DAY) == record


def test_first_communion_mark_defaults_status_to_absent(svc, members_repo):
    m = members_repo.add(name="Ann", gender="female")

    record = svc.set_communion(m.member_id, DAY, True)

    assert record.status == AttendanceStatus.ABSENT
    assert record.communion is True


def test_updates_change_only_the_given_field(svc, members_repo, attendance_repo):
    m = members_repo.add(name="Tom", gender="male")
    svc.set_communion(m.member_id, DAY, True)

    record = svc.set_status(m.member_id, DAY, AttendanceStatus.PRESENT)
    assert (record.status, record.communion) == (AttendanceStatus.PRESENT, True)

    record = svc.set_communion(m.member_id, DAY, False)
    assert (record.status, record.communion) == (AttendanceStatus.PRESENT, False)
    assert len(attendance_repo.list_for_date(DAY)) == 1


@pytest.mark.parametrize("value", [AttendanceStatus.ABSENT, "absent", " ABSENT "])
def test_parse_status_accepts_enum_and_text(value):
    assert parse_status(value) is AttendanceStatus.ABSENT


def test_unknown_member_and_bad_status_are_rejected(svc, members_repo):
    with pytest.raises(ValidationError):
        svc.set_status(99, DAY, "present")

    m = members_repo.add(name="Tom", gender="male")
    with pytest.raises(ValidationError):
        svc.set_status(m.member_id, DAY, "late")


def test_sheet_lists_roster_records_and_totals(svc, members_repo, attendance_repo):
    ann = members_repo.add(name="Ann", gender="female", tag="choir")
    tom = members_repo.add(name="Tom", gender="male")
    members_repo.add(name="Sue", gender="female")
    attendance_repo.add(ann.member_id, DAY, AttendanceStatus.PRESENT, communion=True)
    attendance_repo.add(tom.member_id, DAY, AttendanceStatus.ABSENT)
    attendance_repo.add(tom.member_id, date(2024, 6, 9), AttendanceStatus.PRESENT)

    sheet = svc.get_sheet(DAY)

    assert [m.name for m in sheet.members] == ["Ann", "Sue", "Tom"]
    assert set(sheet.records) == {ann.member_id, tom.member_id}
    assert sheet.totals.to_dict() == {"present": 1, "absent": 1, "communion": 1}
    assert sheet.is_marked is True
    assert svc.get_sheet(date(2024, 6, 16)).is_marked is False


def test_marked_dates_only_include_present_days(svc, attendance_repo):
    attendance_repo.add(1, date(2024, 6, 9), AttendanceStatus.PRESENT)
    attendance_repo.add(2, date(2024, 6, 9), AttendanceStatus.PRESENT)
    attendance_repo.add(1, date(2024, 6, 2), AttendanceStatus.PRESENT)
    attendance_repo.add(1, date(2024, 6, 16), AttendanceStatus.ABSENT)

    assert svc.marked_dates() == [date(2024, 6, 2), date(2024, 6, 9)]
