from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord
from .query import AttendanceFilter


class AttendanceRepository(Protocol):
    def upsert_with_employee(
        self,
        *,
        emp_id: str,
        emp_name: str,
        attendance_type: str,
        work_date: date,
    ) -> int:
        """Upsert the employee and the (emp_id, date) record atomically.

        Returns the record id, unchanged when an existing record is overwritten.
        """

        raise NotImplementedError

    def list_by_employee(self, emp_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_filtered(self, filters: AttendanceFilter) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(self, *, emp_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError
