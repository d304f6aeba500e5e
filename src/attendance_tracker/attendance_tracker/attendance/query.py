from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional


class Column(str, Enum):
    """Filterable columns of ``attendance_records`` (SQL identifiers)."""

    EMP_ID = "emp_id"
    ATTENDANCE_TYPE = "attendance_type"
    DATE = "`date`"


class Operator(str, Enum):
    EQ = "="
    GTE = ">="
    LTE = "<="


@dataclass(frozen=True)
class Predicate:
    column: Column
    operator: Operator
    value: Any

    def to_sql(self) -> str:
        return f"{self.column.value} {self.operator.value} %s"


@dataclass(frozen=True)
class AttendanceFilter:
    """Optional, AND-combined filters for listing attendance records.

    Identifiers and operators come from the enums above; values are always
    bound as query parameters.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    attendance_type: Optional[str] = None
    emp_id: Optional[str] = None

    def predicates(self) -> list[Predicate]:
        out: list[Predicate] = []
        if self.emp_id is not None:
            out.append(Predicate(Column.EMP_ID, Operator.EQ, self.emp_id))
        if self.start_date is not None:
            out.append(Predicate(Column.DATE, Operator.GTE, self.start_date))
        if self.end_date is not None:
            out.append(Predicate(Column.DATE, Operator.LTE, self.end_date))
        if self.attendance_type is not None:
            out.append(Predicate(Column.ATTENDANCE_TYPE, Operator.EQ, self.attendance_type))
        return out

    def to_where(self) -> tuple[str, tuple]:
        predicates = self.predicates()
        if not predicates:
            return "1=1", ()
        where = " AND ".join(p.to_sql() for p in predicates)
        return where, tuple(p.value for p in predicates)

    def matches(self, *, emp_id: str, attendance_type: str, work_date: date) -> bool:
        """Same semantics as ``to_where`` for in-memory rows."""

        values = {
            Column.EMP_ID: emp_id,
            Column.ATTENDANCE_TYPE: attendance_type,
            Column.DATE: work_date,
        }
        for p in self.predicates():
            actual = values[p.column]
            if p.operator is Operator.EQ and actual != p.value:
                return False
            if p.operator is Operator.GTE and actual < p.value:
                return False
            if p.operator is Operator.LTE and actual > p.value:
                return False
        return True
