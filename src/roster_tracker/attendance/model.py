from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one member's attendance on one date.

    ``communion`` is independent of ``status``: a member may be marked for
    communion without being marked present.
    """

    member_id: int
    attend_date: date
    status: AttendanceStatus
    communion: bool = False

    def to_dict(self) -> dict:
        return {
            "member_id": self.member_id,
            "date": self.attend_date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "communion": self.communion,
        }
