from __future__ import annotations

import platform
import time
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import to_iso, utc_timestamp
from ..core.exceptions import PersistenceError
from ..database.bootstrap import SchemaStatus
from .repository import DatabaseProbe


@dataclass(frozen=True)
class HealthReport:
    ok: bool
    body: dict


class HealthService:
    """Use case: report database reachability and schema readiness."""

    def __init__(self, probe: DatabaseProbe, *, environment: str):
        self._probe = probe
        self._environment = environment
        self._started = time.monotonic()

    def uptime_seconds(self) -> float:
        return round(time.monotonic() - self._started, 3)

    def check(self, schema: Optional[SchemaStatus] = None) -> HealthReport:
        schema_ready = bool(schema and schema.ready)
        try:
            db_time = self._probe.current_time()
        except PersistenceError as exc:
            return HealthReport(
                ok=False,
                body={
                    "status": "ERROR",
                    "timestamp": utc_timestamp(),
                    "environment": self._environment,
                    "database": {
                        "status": "Disconnected",
                        "error": exc.message,
                        "schema_ready": schema_ready,
                    },
                },
            )

        database = {
            "status": "Connected",
            "current_time": to_iso(db_time),
            "schema_ready": schema_ready,
        }
        if schema is not None and schema.error:
            database["schema_error"] = schema.error

        return HealthReport(
            ok=True,
            body={
                "status": "OK",
                "timestamp": utc_timestamp(),
                "environment": self._environment,
                "database": database,
                "server": {
                    "uptime": self.uptime_seconds(),
                    "python_version": platform.python_version(),
                },
            },
        )
