from __future__ import annotations

from datetime import date

from roster_tracker.core.enums import AttendanceStatus
from roster_tracker.insights.service import InsightsService

P = AttendanceStatus.PRESENT


def test_dashboard_stats(members_repo, attendance_repo):
    ann = members_repo.add(name="Ann", gender="female", is_teenager=True)
    tom = members_repo.add(name="Tom", gender="male")
    attendance_repo.add(ann.member_id, date(2024, 5, 5), P)
    attendance_repo.add(tom.member_id, date(2024, 5, 5), P)
    attendance_repo.add(ann.member_id, date(2024, 5, 12), P)
    attendance_repo.add(tom.member_id, date(2024, 5, 12), AttendanceStatus.ABSENT)

    stats = InsightsService(members_repo, attendance_repo).dashboard_stats()

    assert stats.total_members == 2
    assert (stats.demographics.male, stats.demographics.female, stats.demographics.teenager) == (1, 1, 1)
    assert stats.to_dict()["attendance"] == {
        "highest": {"date": "2024-05-05", "count": 2},
        "lowest": {"date": "2024-05-12", "count": 1},
    }


def test_weekly_attendance_window(members_repo, attendance_repo):
    today = date(2024, 5, 12)
    attendance_repo.add(1, date(2024, 5, 12), P, communion=True)
    attendance_repo.add(2, date(2024, 5, 5), AttendanceStatus.ABSENT)
    attendance_repo.add(1, date(2024, 5, 4), P)

    series = InsightsService(members_repo, attendance_repo, window_days=7).weekly_attendance(today=today)

    assert [(d.day, d.present, d.absent, d.communion) for d in series] == [
        (date(2024, 5, 12), 1, 0, 1),
        (date(2024, 5, 5), 0, 1, 0),
    ]


def test_top_attenders_uses_configured_limit(members_repo, attendance_repo):
    for i in range(7):
        members_repo.add(name=f"M{i}", gender="male")
    attendance_repo.add(3, date(2024, 5, 5), P)

    svc = InsightsService(members_repo, attendance_repo, top_limit=5)

    top = svc.top_attenders()
    assert len(top) == 5
    assert (top[0].name, top[0].attendance_count) == ("M2", 1)
    assert len(svc.top_attenders(limit=2)) == 2
