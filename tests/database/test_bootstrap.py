from __future__ import annotations

import pytest
from mysql.connector import errorcode, errors

from src.attendance_tracker.attendance_tracker.database.bootstrap import (
    SCHEMA_PATH,
    _iter_sql_statements,
    _strip_comments,
    ensure_schema,
)

TABLE_ROWS = [("attendance_records",), ("employees",)]


def test_schema_applies_every_statement_and_reports_ready(fake_db):
    conn, factory = fake_db([{}, {}, {}, {}, {"rows": TABLE_ROWS}])

    status = ensure_schema(factory)

    assert status.ready is True
    assert status.error is None
    assert status.tables == ["attendance_records", "employees"]
    statements = [sql for sql, _ in conn.executed]
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS employees")
    assert statements[1].startswith("CREATE TABLE IF NOT EXISTS attendance_records")
    assert statements[2].startswith("CREATE INDEX idx_attendance_emp_date")
    assert statements[3].startswith("CREATE INDEX idx_attendance_date")
    assert statements[4] == "SHOW TABLES"


def test_rerun_tolerates_existing_indexes(fake_db):
    dup = errors.ProgrammingError(msg="Duplicate key name 'idx_attendance_emp_date'", errno=errorcode.ER_DUP_KEYNAME)
    conn, factory = fake_db([{}, {}, {"error": dup}, {"error": dup}, {"rows": TABLE_ROWS}])

    status = ensure_schema(factory)

    assert status.ready is True
    assert conn.rollbacks == 0


def test_unreachable_database_is_reported_not_raised(fake_db):
    down = errors.InterfaceError(msg="Can't connect to MySQL server on 'db:3306'", errno=errorcode.CR_CONN_HOST_ERROR)
    conn, factory = fake_db([{"error": down}])

    status = ensure_schema(factory)

    assert status.ready is False
    assert "Can't connect" in status.error
    assert conn.rollbacks == 1


def test_missing_tables_are_reported(fake_db):
    conn, factory = fake_db([{}, {}, {}, {}, {"rows": [("employees",)]}])

    status = ensure_schema(factory)

    assert status.ready is False
    assert status.error == "Missing tables: attendance_records"
    assert status.tables == ["employees"]


def test_missing_schema_file_is_reported(fake_db, tmp_path):
    conn, factory = fake_db()

    status = ensure_schema(factory, schema_path=tmp_path / "absent.sql")

    assert status.ready is False
    assert conn.executed == []


def test_statement_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT `x;y` FROM t;\n"

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT `x;y` FROM t"]


def _column_definition(table: str, column: str) -> str:
    statements = _iter_sql_statements(_strip_comments(SCHEMA_PATH.read_text(encoding="utf-8")))
    create = next(s for s in statements if s.startswith(f"CREATE TABLE IF NOT EXISTS {table} "))
    return next(line.strip() for line in create.splitlines() if line.strip().startswith(f"{column} "))


@pytest.mark.parametrize(
    "table, column",
    [("employees", "emp_id"), ("attendance_records", "emp_id"), ("attendance_records", "attendance_type")],
)
def test_identity_columns_compare_case_sensitively(table, column):
    assert "COLLATE utf8mb4_bin" in _column_definition(table, column)
