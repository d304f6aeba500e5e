from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger("attendance_tracker.database")

SCHEMA_PATH = Path(__file__).resolve().with_name("schema.sql")
REQUIRED_TABLES = ("employees", "attendance_records")

# Re-running CREATE INDEX on an existing index is the only expected failure.
TOLERATED_ERRNOS = frozenset({errorcode.ER_DUP_KEYNAME})


@dataclass(frozen=True)
class SchemaStatus:
    ready: bool
    tables: list[str] = field(default_factory=list)
    error: Optional[str] = None


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for the schema file (handles ';' inside quotes).
    buf: list[str] = []
    quote: Optional[str] = None
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\" and quote is not None:
            buf.append(ch)
            escape = True
            continue

        if ch in ("'", '"', "`"):
            if quote is None:
                quote = ch
            elif quote == ch:
                quote = None
            buf.append(ch)
            continue

        if ch == ";" and quote is None:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(_strip_comments(sql)):
        try:
            cur.execute(stmt)
        except mysql.connector.Error as exc:
            if exc.errno not in TOLERATED_ERRNOS:
                raise
            logger.debug("schema_object_exists", extra={"statement": stmt.split("(", 1)[0].strip()})


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    sql = Path(schema_path).read_text(encoding="utf-8")
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        _exec_sql(cur, sql)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [str(row[0]) for row in cur.fetchall()]


def ensure_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> SchemaStatus:
    """Create tables and indexes if missing.

    Never raises: a failure is logged and reported as a not-ready status so
    the HTTP layer still starts and ``/health`` can surface the problem.
    """

    logger.info("schema_init_started", extra={"database": conn_factory.config.describe()})
    try:
        apply_schema(conn_factory, schema_path=schema_path)
        tables = list_tables(conn_factory)
    except (PersistenceError, OSError) as exc:
        logger.error("schema_init_failed", extra={"error": str(exc)}, exc_info=True)
        return SchemaStatus(ready=False, error=str(exc))

    missing = [name for name in REQUIRED_TABLES if name not in tables]
    if missing:
        error = f"Missing tables: {', '.join(missing)}"
        logger.error("schema_init_incomplete", extra={"tables": tables, "missing": missing})
        return SchemaStatus(ready=False, tables=tables, error=error)

    logger.info("schema_init_complete", extra={"tables": tables})
    return SchemaStatus(ready=True, tables=tables)
