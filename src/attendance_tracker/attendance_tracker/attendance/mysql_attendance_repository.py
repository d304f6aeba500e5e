from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, db_transaction, fetchall, fetchone
from ..employees.mysql_employee_repository import upsert_employee_row
from .model import AttendanceRecord
from .query import AttendanceFilter
from .repository import AttendanceRepository

RECORD_COLUMNS = "id, emp_id, emp_name, attendance_type, `date`, `timestamp`"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        emp_id=str(r["emp_id"]),
        emp_name=r["emp_name"],
        attendance_type=r["attendance_type"],
        date=r["date"],
        timestamp=r.get("timestamp"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_with_employee(
        self,
        *,
        emp_id: str,
        emp_name: str,
        attendance_type: str,
        work_date: date,
    ) -> int:
        with db_transaction(self._conn_factory) as (_, cur):
            upsert_employee_row(cur, emp_id=emp_id, name=emp_name)

            # LAST_INSERT_ID(id) makes lastrowid report the existing row on update.
            cur.execute(
                """
                INSERT INTO attendance_records(emp_id, emp_name, attendance_type, `date`)
                VALUES(%s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    id=LAST_INSERT_ID(id),
                    emp_name=%s,
                    attendance_type=%s,
                    `timestamp`=CURRENT_TIMESTAMP
                """,
                (emp_id, emp_name, attendance_type, work_date, emp_name, attendance_type),
            )
            if cur.lastrowid:
                return int(cur.lastrowid)

            # No-op update (identical values in the same second) reports no id.
            cur.execute(
                "SELECT id FROM attendance_records WHERE emp_id=%s AND `date`=%s",
                (emp_id, work_date),
            )
            row = fetchone(cur)
            return int(row["id"])

    def list_by_employee(self, emp_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {RECORD_COLUMNS}
                FROM attendance_records
                WHERE emp_id=%s
                ORDER BY `date` DESC
                """,
                (emp_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_filtered(self, filters: AttendanceFilter) -> Sequence[AttendanceRecord]:
        where, params = filters.to_where()

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {RECORD_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY `date` DESC, emp_id ASC
                """,
                params,
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_range(self, *, emp_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return self.list_filtered(AttendanceFilter(emp_id=emp_id, start_date=start_date, end_date=end_date))

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0
