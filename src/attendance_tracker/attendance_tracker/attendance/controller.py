from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import utc_timestamp
from ..container import Container
from ..system.routing import api_path, json_body


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route(api_path(app, "/attendance"), methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        data = json_body()
        record_id = service.record_attendance(
            emp_id=data.get("emp_id"),
            emp_name=data.get("emp_name"),
            attendance_type=data.get("attendance_type"),
            work_date=data.get("date"),
        )
        return jsonify(
            {
                "message": "Attendance record added successfully",
                "id": record_id,
                "timestamp": utc_timestamp(),
            }
        )

    @app.route(api_path(app, "/attendance"), methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        records = service.list_filtered(
            start_date=request.args.get("start_date"),
            end_date=request.args.get("end_date"),
            attendance_type=request.args.get("attendance_type"),
        )
        return jsonify([r.to_dict() for r in records])

    @app.route(api_path(app, "/attendance/<emp_id>"), methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(emp_id: str):
        records = service.list_for_employee(emp_id)
        return jsonify([r.to_dict() for r in records])

    @app.route(
        api_path(app, "/attendance-range/<emp_id>/<start_date>/<end_date>"),
        methods=["GET"],
        endpoint="attendance_range",
    )
    def attendance_range(emp_id: str, start_date: str, end_date: str):
        records = service.list_range(emp_id=emp_id, start_date=start_date, end_date=end_date)
        return jsonify([r.to_dict() for r in records])

    @app.route(api_path(app, "/attendance/<record_id>"), methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(record_id: str):
        service.delete_record(record_id)
        return jsonify({"message": "Record deleted successfully", "timestamp": utc_timestamp()})
