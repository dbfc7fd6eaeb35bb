from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Repository interface for the ``attendance`` table, keyed by (member_id, date)."""

    def list_for_date(self, attend_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_status(self, status: AttendanceStatus) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records with start_date <= date <= end_date, newest date first."""

        raise NotImplementedError

    def list_dates_with_status(self, status: AttendanceStatus) -> Sequence[date]:
        """Distinct dates having at least one record with ``status``, ascending."""

        raise NotImplementedError

    def get_for_member_and_date(self, member_id: int, attend_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def update(self, record: AttendanceRecord) -> bool:
        """Overwrite status/communion of the record with the same composite key."""

        raise NotImplementedError
