from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository

UPSERT_EMPLOYEE_SQL = """
    INSERT INTO employees(emp_id, name, updated_at)
    VALUES(%s, %s, CURRENT_TIMESTAMP)
    ON DUPLICATE KEY UPDATE name=%s, updated_at=CURRENT_TIMESTAMP
"""


def upsert_employee_row(cur, *, emp_id: str, name: str) -> None:
    """Shared by the attendance write so both run inside its transaction."""

    cur.execute(UPSERT_EMPLOYEE_SQL, (emp_id, name, name))


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT emp_id, name, created_at, updated_at
                FROM employees
                ORDER BY name ASC
                """
            )
            rows = fetchall(cur)
            return [
                Employee(
                    emp_id=str(r["emp_id"]),
                    name=r["name"],
                    created_at=r.get("created_at"),
                    updated_at=r.get("updated_at"),
                )
                for r in rows
            ]

    def upsert(self, *, emp_id: str, name: str) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            upsert_employee_row(cur, emp_id=emp_id, name=name)
            return emp_id
