from __future__ import annotations

from enum import Enum


class AttendanceType(str, Enum):
    """Attendance types counted separately by the statistics endpoint.

    The column itself is free text; other values are stored as given.
    """

    WFO = "WFO"
    WFH = "WFH"
