from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .stats.mysql_stats_repository import MySQLStatsRepository
from .stats.repository import StatsRepository
from .stats.service import StatsService
from .system.mysql_health_repository import MySQLDatabaseProbe
from .system.repository import DatabaseProbe
from .system.service import HealthService


@dataclass(frozen=True)
class Container:
    # None when repositories are injected without a database (tests).
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    stats_repo: StatsRepository
    db_probe: DatabaseProbe

    employee_service: EmployeeService
    attendance_service: AttendanceService
    stats_service: StatsService
    health_service: HealthService


def assemble(
    *,
    conn: Optional[DatabaseConnection],
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    stats_repo: StatsRepository,
    db_probe: DatabaseProbe,
    environment: str,
) -> Container:
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        stats_repo=stats_repo,
        db_probe=db_probe,
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo),
        stats_service=StatsService(stats_repo),
        health_service=HealthService(db_probe, environment=environment),
    )


def build_container(*, db_config: DBConfig, environment: str) -> Container:
    conn = DatabaseConnection(db_config)
    return assemble(
        conn=conn,
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        stats_repo=MySQLStatsRepository(conn),
        db_probe=MySQLDatabaseProbe(conn),
        environment=environment,
    )
