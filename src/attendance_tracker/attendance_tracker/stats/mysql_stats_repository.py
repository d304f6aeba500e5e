from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TypeCount
from .repository import StatsRepository


class MySQLStatsRepository(StatsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _scalar_count(self, sql: str, params: tuple = ()) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            row = fetchone(cur)
            return int(row["count"]) if row else 0

    def count_employees(self) -> int:
        return self._scalar_count("SELECT COUNT(*) AS count FROM employees")

    def count_records(self) -> int:
        return self._scalar_count("SELECT COUNT(*) AS count FROM attendance_records")

    def count_records_of_type(self, attendance_type: str) -> int:
        return self._scalar_count(
            "SELECT COUNT(*) AS count FROM attendance_records WHERE attendance_type=%s",
            (attendance_type,),
        )

    def count_by_type(self) -> Sequence[TypeCount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_type, COUNT(*) AS count
                FROM attendance_records
                GROUP BY attendance_type
                ORDER BY count DESC
                """
            )
            return [TypeCount(attendance_type=r["attendance_type"], count=int(r["count"])) for r in fetchall(cur)]
