from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import (
    optional_iso_date,
    require_int,
    require_iso_date,
    require_max_length,
    require_non_empty,
)
from ..core.constants import MAX_ATTENDANCE_TYPE_LENGTH, MAX_EMP_ID_LENGTH, MAX_NAME_LENGTH
from ..core.exceptions import NotFoundError
from .model import AttendanceRecord
from .query import AttendanceFilter
from .repository import AttendanceRepository

logger = logging.getLogger("attendance_tracker.attendance")


class AttendanceService:
    """Use cases: record, query and delete attendance entries."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record_attendance(self, *, emp_id: Any, emp_name: Any, attendance_type: Any, work_date: Any) -> int:
        """Write (or overwrite) the employee's entry for ``work_date``.

        The employee row is created or renamed in the same transaction.
        """

        emp_id = require_max_length(require_non_empty(emp_id, "Employee ID"), "Employee ID", MAX_EMP_ID_LENGTH)
        emp_name = require_max_length(require_non_empty(emp_name, "Employee name"), "Employee name", MAX_NAME_LENGTH)
        attendance_type = require_max_length(
            require_non_empty(attendance_type, "Attendance type"),
            "Attendance type",
            MAX_ATTENDANCE_TYPE_LENGTH,
        )
        day = require_iso_date(work_date, "Date")

        record_id = self._attendance.upsert_with_employee(
            emp_id=emp_id,
            emp_name=emp_name,
            attendance_type=attendance_type,
            work_date=day,
        )
        logger.info(
            "attendance_recorded",
            extra={"record_id": record_id, "emp_id": emp_id, "attendance_type": attendance_type, "date": day.isoformat()},
        )
        return record_id

    def list_for_employee(self, emp_id: Any) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_employee(require_non_empty(emp_id, "Employee ID"))

    def list_filtered(
        self,
        *,
        start_date: Any = None,
        end_date: Any = None,
        attendance_type: Any = None,
    ) -> Sequence[AttendanceRecord]:
        if isinstance(attendance_type, str):
            attendance_type = attendance_type.strip() or None

        filters = AttendanceFilter(
            start_date=optional_iso_date(start_date, "start_date"),
            end_date=optional_iso_date(end_date, "end_date"),
            attendance_type=attendance_type,
        )
        return self._attendance.list_filtered(filters)

    def list_range(self, *, emp_id: Any, start_date: Any, end_date: Any) -> Sequence[AttendanceRecord]:
        return self._attendance.list_range(
            emp_id=require_non_empty(emp_id, "Employee ID"),
            start_date=require_iso_date(start_date, "start_date"),
            end_date=require_iso_date(end_date, "end_date"),
        )

    def delete_record(self, record_id: Any) -> None:
        rid = require_int(record_id, "Record ID")
        if not self._attendance.delete_by_id(rid):
            raise NotFoundError("Record not found")
        logger.info("attendance_deleted", extra={"record_id": rid})
