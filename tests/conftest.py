from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord
from src.attendance_tracker.attendance_tracker.attendance.query import AttendanceFilter
from src.attendance_tracker.attendance_tracker.container import assemble
from src.attendance_tracker.attendance_tracker.core.exceptions import DatabaseUnavailableError
from src.attendance_tracker.attendance_tracker.database.connection import DBConfig
from src.attendance_tracker.attendance_tracker.employees.model import Employee
from src.attendance_tracker.attendance_tracker.stats.model import TypeCount


class FakeClock:
    """Deterministic clock; each call moves forward one second."""

    def __init__(self, start: datetime):
        self._now = start

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class InMemoryEmployees:
    def __init__(self, clock: FakeClock):
        self.rows: dict[str, Employee] = {}
        self._clock = clock

    def list_all(self):
        return sorted(self.rows.values(), key=lambda e: e.name)

    def upsert(self, *, emp_id: str, name: str) -> str:
        now = self._clock()
        existing = self.rows.get(emp_id)
        self.rows[emp_id] = Employee(
            emp_id=emp_id,
            name=name,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        return emp_id


class InMemoryAttendance:
    def __init__(self, employees: InMemoryEmployees, clock: FakeClock):
        self.rows: dict[int, AttendanceRecord] = {}
        self.failure: Optional[Exception] = None
        self._employees = employees
        self._clock = clock
        self._next_id = 0

    def upsert_with_employee(self, *, emp_id, emp_name, attendance_type, work_date) -> int:
        if self.failure is not None:
            raise self.failure

        self._employees.upsert(emp_id=emp_id, name=emp_name)
        existing = next((r for r in self.rows.values() if r.emp_id == emp_id and r.date == work_date), None)
        if existing:
            record_id = existing.id
        else:
            self._next_id += 1
            record_id = self._next_id

        self.rows[record_id] = AttendanceRecord(
            id=record_id,
            emp_id=emp_id,
            emp_name=emp_name,
            attendance_type=attendance_type,
            date=work_date,
            timestamp=self._clock(),
        )
        return record_id

    def list_by_employee(self, emp_id):
        items = [r for r in self.rows.values() if r.emp_id == emp_id]
        return sorted(items, key=lambda r: r.date, reverse=True)

    def list_filtered(self, filters: AttendanceFilter):
        items = [
            r
            for r in self.rows.values()
            if filters.matches(emp_id=r.emp_id, attendance_type=r.attendance_type, work_date=r.date)
        ]
        items.sort(key=lambda r: r.emp_id)
        items.sort(key=lambda r: r.date, reverse=True)
        return items

    def list_range(self, *, emp_id, start_date: date, end_date: date):
        return self.list_filtered(AttendanceFilter(emp_id=emp_id, start_date=start_date, end_date=end_date))

    def delete_by_id(self, record_id: int) -> bool:
        return self.rows.pop(int(record_id), None) is not None


class InMemoryStats:
    def __init__(self, employees: InMemoryEmployees, attendance: InMemoryAttendance):
        self._employees = employees
        self._attendance = attendance

    def count_employees(self) -> int:
        return len(self._employees.rows)

    def count_records(self) -> int:
        return len(self._attendance.rows)

    def count_records_of_type(self, attendance_type: str) -> int:
        return sum(1 for r in self._attendance.rows.values() if r.attendance_type == attendance_type)

    def count_by_type(self):
        counts: dict[str, int] = {}
        for r in self._attendance.rows.values():
            counts[r.attendance_type] = counts.get(r.attendance_type, 0) + 1
        out = [TypeCount(attendance_type=k, count=v) for k, v in counts.items()]
        out.sort(key=lambda t: t.count, reverse=True)
        return out


class FakeProbe:
    def __init__(self, now: datetime):
        self.now = now
        self.failure: Optional[Exception] = None

    def current_time(self) -> datetime:
        if self.failure is not None:
            raise self.failure
        return self.now


@dataclass
class InMemoryStore:
    employees: InMemoryEmployees
    attendance: InMemoryAttendance
    stats: InMemoryStats
    probe: FakeProbe


# ---------------------------------------------------------------------------
# Fake mysql-connector objects for repository tests


class FakeCursor:
    def __init__(self, conn: "FakeConnection", dictionary: bool):
        self._conn = conn
        self.dictionary = dictionary
        self._rows: list = []
        self.lastrowid = None
        self.rowcount = 0

    def execute(self, sql, params=()):
        self._conn.executed.append((" ".join(sql.split()), tuple(params)))
        response = self._conn.responses.pop(0) if self._conn.responses else {}
        if "error" in response:
            raise response["error"]
        self._rows = list(response.get("rows", []))
        self.lastrowid = response.get("lastrowid")
        self.rowcount = response.get("rowcount", len(self._rows))

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

    def close(self):
        self._conn.cursors_closed += 1


class FakeConnection:
    def __init__(self, responses=()):
        self.responses = list(responses)
        self.executed: list[tuple[str, tuple]] = []
        self.transactions = 0
        self.commits = 0
        self.rollbacks = 0
        self.cursors_closed = 0

    def cursor(self, dictionary=True):
        return FakeCursor(self, dictionary)

    def start_transaction(self):
        self.transactions += 1

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakeConnectionFactory:
    """Stands in for DatabaseConnection: lends the same FakeConnection every time."""

    def __init__(self, conn: FakeConnection):
        self.conn = conn
        self.config = DBConfig(host="db", port=3306, user="app", password="secret", database="attendance")
        self.borrowed = 0
        self.released = 0

    @contextmanager
    def connection(self):
        self.borrowed += 1
        try:
            yield self.conn
        finally:
            self.released += 1


# ---------------------------------------------------------------------------
# Fixtures


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 10, 9, 0, 0)


@pytest.fixture
def store(fixed_now) -> InMemoryStore:
    clock = FakeClock(fixed_now)
    employees = InMemoryEmployees(clock)
    attendance = InMemoryAttendance(employees, clock)
    return InMemoryStore(
        employees=employees,
        attendance=attendance,
        stats=InMemoryStats(employees, attendance),
        probe=FakeProbe(fixed_now),
    )


@pytest.fixture
def container(store):
    return assemble(
        conn=None,
        employees_repo=store.employees,
        attendance_repo=store.attendance,
        stats_repo=store.stats,
        db_probe=store.probe,
        environment="testing",
    )


@pytest.fixture
def make_app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    from src.attendance_tracker.attendance_tracker.main import create_app

    def _make(**overrides):
        settings = {"TESTING": True, "AUTO_INIT_DB": False, "API_PREFIX": "/api"}
        settings.update(overrides)
        return create_app(container=container, **settings)

    return _make


@pytest.fixture
def client(make_app):
    return make_app().test_client()


@pytest.fixture
def unavailable_error() -> DatabaseUnavailableError:
    return DatabaseUnavailableError("Can't connect to MySQL server on 'db:3306' (111 Connection refused)")


@pytest.fixture
def fake_db():
    """Factory: ``fake_db(responses)`` -> (FakeConnection, FakeConnectionFactory)."""

    def _make(responses=()):
        conn = FakeConnection(responses)
        return conn, FakeConnectionFactory(conn)

    return _make
