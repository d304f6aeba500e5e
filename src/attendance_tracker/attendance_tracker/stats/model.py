from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TypeCount:
    attendance_type: str
    count: int


@dataclass(frozen=True)
class AttendanceStats:
    """Read-model for the statistics endpoint (camelCase keys on the wire)."""

    total_employees: int
    total_records: int
    wfo_records: int
    wfh_records: int
    attendance_by_type: list[TypeCount] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "totalRecords": self.total_records,
            "wfoRecords": self.wfo_records,
            "wfhRecords": self.wfh_records,
            "attendanceByType": [
                {"attendance_type": t.attendance_type, "count": t.count} for t in self.attendance_by_type
            ],
        }
