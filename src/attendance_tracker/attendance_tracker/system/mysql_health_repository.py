from __future__ import annotations

from datetime import datetime

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import DatabaseProbe


class MySQLDatabaseProbe(DatabaseProbe):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def current_time(self) -> datetime:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT NOW() AS db_time")
            row = fetchone(cur)
            return row["db_time"] if row else None
