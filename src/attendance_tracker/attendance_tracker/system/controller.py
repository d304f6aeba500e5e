from __future__ import annotations

from flask import Flask, jsonify

from .. import __version__
from ..common.datetime_utils import utc_timestamp
from ..container import Container
from ..core.constants import SERVICE_NAME
from .routing import api_path


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return jsonify(
            {
                "message": f"{SERVICE_NAME} is running!",
                "timestamp": utc_timestamp(),
                "environment": app.config.get("ENVIRONMENT"),
                "version": __version__,
                "endpoints": {
                    "employees": api_path(app, "/employees"),
                    "attendance": api_path(app, "/attendance"),
                    "stats": api_path(app, "/stats"),
                    "health": api_path(app, "/health"),
                },
            }
        )

    @app.route(api_path(app, "/health"), methods=["GET"], endpoint="health")
    def health():
        report = container.health_service.check(app.extensions.get("schema_status"))
        return jsonify(report.body), (200 if report.ok else 500)
