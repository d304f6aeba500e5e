from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry per employee per calendar date."""

    id: int
    emp_id: str
    emp_name: str
    attendance_type: str
    date: date
    timestamp: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "emp_id": self.emp_id,
            "emp_name": self.emp_name,
            "attendance_type": self.attendance_type,
            "date": to_iso(self.date),
            "timestamp": to_iso(self.timestamp),
        }
