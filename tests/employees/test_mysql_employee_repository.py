from __future__ import annotations

from datetime import datetime

from src.attendance_tracker.attendance_tracker.employees.mysql_employee_repository import MySQLEmployeeRepository


def test_list_all_maps_rows_and_orders_by_name(fake_db):
    created = datetime(2024, 1, 1, 8, 0)
    conn, factory = fake_db(
        [{"rows": [{"emp_id": "E1", "name": "Alice", "created_at": created, "updated_at": created}]}]
    )

    employees = MySQLEmployeeRepository(factory).list_all()

    assert employees[0].emp_id == "E1"
    assert employees[0].to_dict()["created_at"] == "2024-01-01T08:00:00"
    sql, params = conn.executed[0]
    assert "ORDER BY name ASC" in sql
    assert params == ()


def test_upsert_binds_name_for_insert_and_update(fake_db):
    conn, factory = fake_db()

    assert MySQLEmployeeRepository(factory).upsert(emp_id="E1", name="Alice") == "E1"

    sql, params = conn.executed[0]
    assert sql.startswith("INSERT INTO employees")
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params == ("E1", "Alice", "Alice")
    assert conn.commits == 1
    assert factory.released == 1
