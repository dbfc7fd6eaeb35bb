from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class AttendanceStatus(str, Enum):
    """Attendance status stored per (member, date)."""

    PRESENT = "present"
    ABSENT = "absent"


class IssueSeverity(str, Enum):
    """Severity of a problem found while validating an imported CSV row."""

    WARNING = "warning"
    ERROR = "error"
