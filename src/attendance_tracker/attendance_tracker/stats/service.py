from __future__ import annotations

from ..core.enums import AttendanceType
from .model import AttendanceStats
from .repository import StatsRepository


class StatsService:
    def __init__(self, stats: StatsRepository):
        self._stats = stats

    def compute_stats(self) -> AttendanceStats:
        return AttendanceStats(
            total_employees=self._stats.count_employees(),
            total_records=self._stats.count_records(),
            wfo_records=self._stats.count_records_of_type(AttendanceType.WFO.value),
            wfh_records=self._stats.count_records_of_type(AttendanceType.WFH.value),
            attendance_by_type=list(self._stats.count_by_type()),
        )
