from __future__ import annotations

from dataclasses import dataclass

from .access.service import AccessService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_INSIGHTS_DAYS, DEFAULT_TOP_ATTENDERS
from .database.connection import DBConfig, DatabaseConnection
from .insights.service import InsightsService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService


@dataclass(frozen=True)
class Container:
    members_repo: MemberRepository
    attendance_repo: AttendanceRepository

    access_service: AccessService
    member_service: MemberService
    attendance_service: AttendanceService
    insights_service: InsightsService


def build_services(
    *,
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    access_code: str,
    top_limit: int = DEFAULT_TOP_ATTENDERS,
    window_days: int = DEFAULT_INSIGHTS_DAYS,
) -> Container:
    return Container(
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        access_service=AccessService(access_code),
        member_service=MemberService(members_repo),
        attendance_service=AttendanceService(attendance_repo, members_repo),
        insights_service=InsightsService(
            members_repo,
            attendance_repo,
            top_limit=top_limit,
            window_days=window_days,
        ),
    )


def build_container(
    *,
    db_config: dict,
    access_code: str,
    top_limit: int = DEFAULT_TOP_ATTENDERS,
    window_days: int = DEFAULT_INSIGHTS_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        access_code=access_code,
        top_limit=top_limit,
        window_days=window_days,
    )
