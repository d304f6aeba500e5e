from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import utc_timestamp
from ..container import Container
from ..system.routing import api_path, json_body


def register(app: Flask, container: Container) -> None:
    @app.route(api_path(app, "/employees"), methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = container.employee_service.list_employees()
        return jsonify([e.to_dict() for e in employees])

    @app.route(api_path(app, "/employees"), methods=["POST"], endpoint="upsert_employee")
    def upsert_employee():
        data = json_body()
        emp_id = container.employee_service.upsert_employee(emp_id=data.get("emp_id"), name=data.get("name"))
        return jsonify(
            {
                "message": "Employee saved successfully",
                "emp_id": emp_id,
                "timestamp": utc_timestamp(),
            }
        )
