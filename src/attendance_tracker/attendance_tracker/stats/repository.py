from __future__ import annotations

from typing import Protocol, Sequence

from .model import TypeCount


class StatsRepository(Protocol):
    """Independent count queries; callers must not assume a consistent snapshot."""

    def count_employees(self) -> int:
        raise NotImplementedError

    def count_records(self) -> int:
        raise NotImplementedError

    def count_records_of_type(self, attendance_type: str) -> int:
        raise NotImplementedError

    def count_by_type(self) -> Sequence[TypeCount]:
        raise NotImplementedError
