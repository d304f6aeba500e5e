from __future__ import annotations

import atexit
import importlib
import logging
import time
from typing import Any, Mapping, Optional
from uuid import uuid4

from dotenv import load_dotenv
from flask import Flask, g, request

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import ensure_schema
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .logging_utils import setup_logging
from .stats.controller import register as register_stats
from .system import cors, errors
from .system.controller import register as register_system

logger = logging.getLogger("attendance_tracker.request")
app_logger = logging.getLogger("attendance_tracker.app")

SHUTDOWN_DRAIN_SECONDS = 10.0


def load_settings() -> tuple[str, dict[str, Any]]:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    return settings_module, {key: getattr(settings, key) for key in dir(settings) if key.isupper()}


def db_config_from_settings(settings: Mapping[str, Any]) -> DBConfig:
    options = {
        "ssl": bool(settings.get("DB_SSL", False)),
        "ssl_verify": bool(settings.get("DB_SSL_VERIFY", True)),
        "ssl_ca": settings.get("DB_SSL_CA"),
        "pool_size": int(settings.get("DB_POOL_SIZE", 5)),
        "pool_timeout": float(settings.get("DB_POOL_TIMEOUT", 10)),
    }
    url = settings.get("DATABASE_URL")
    if url:
        return DBConfig.from_url(url, **options)

    db = settings["DB_CONFIG"]
    return DBConfig(
        host=str(db["host"]),
        port=int(db.get("port", 3306)),
        user=str(db["user"]),
        password=str(db["password"]),
        database=str(db["database"]),
        **options,
    )


def _register_request_logging(app: Flask) -> None:
    @app.before_request
    def start_request_timer():
        g.request_id = request.headers.get("X-Request-Id") or str(uuid4())
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        request_id = getattr(g, "request_id", None) or str(uuid4())
        started = getattr(g, "request_started", None)
        latency_ms = round((time.perf_counter() - started) * 1000, 2) if started is not None else None
        response.headers["X-Request-Id"] = request_id
        logger.info(
            "request_complete",
            extra={
                "request_id": request_id,
                "path": request.path,
                "method": request.method,
                "status_code": response.status_code,
                "latency_ms": latency_ms,
                "origin": request.headers.get("Origin"),
            },
        )
        return response


def create_app(*, container: Optional[Container] = None, **overrides: Any) -> Flask:
    """Application factory.

    ``container`` and keyword ``overrides`` (upper-case config keys) let tests
    run the full HTTP stack against in-memory repositories.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module, settings = load_settings()
    app.config.update(settings)
    app.config.update(overrides)
    app.json.sort_keys = False

    if not app.config.get("TESTING"):
        setup_logging(json_logs=bool(app.config.get("LOG_JSON")), level=app.config.get("LOG_LEVEL", "INFO"))

    if container is None:
        db_config = db_config_from_settings(app.config)
        container = build_container(db_config=db_config, environment=str(app.config.get("ENVIRONMENT")))
        atexit.register(container.conn.close, SHUTDOWN_DRAIN_SECONDS)
        app_logger.info(
            "app_configured",
            extra={
                "settings": settings_module,
                "database": db_config.describe(),
                "database_ssl": db_config.ssl,
                "api_prefix": app.config.get("API_PREFIX"),
            },
        )

    schema_status = None
    if app.config.get("AUTO_INIT_DB") and container.conn is not None:
        schema_status = ensure_schema(container.conn)

    app.extensions["container"] = container
    app.extensions["schema_status"] = schema_status

    _register_request_logging(app)
    errors.register(app)
    cors.register(
        app,
        cors.CorsPolicy.from_settings(
            app.config.get("CORS_ALLOWED_ORIGINS"),
            app.config.get("CORS_ALLOWED_ORIGIN_PATTERNS"),
        ),
    )

    register_system(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_stats(app, container)

    return app
