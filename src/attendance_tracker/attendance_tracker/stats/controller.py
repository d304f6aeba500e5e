from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import utc_timestamp
from ..container import Container
from ..system.routing import api_path


def register(app: Flask, container: Container) -> None:
    @app.route(api_path(app, "/stats"), methods=["GET"], endpoint="stats")
    def stats():
        body = container.stats_service.compute_stats().to_dict()
        body["timestamp"] = utc_timestamp()
        return jsonify(body)
