from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DatabaseUnavailableError, PersistenceError
from .connection import DatabaseConnection

# Client-side errnos raised when the server refuses or cannot be reached.
UNAVAILABLE_ERRNOS = frozenset({errorcode.CR_CONNECTION_ERROR, errorcode.CR_CONN_HOST_ERROR})


def translate_error(exc: mysql.connector.Error) -> PersistenceError:
    message = exc.msg if getattr(exc, "msg", None) else str(exc)
    if exc.errno in UNAVAILABLE_ERRNOS:
        return DatabaseUnavailableError(message, cause=exc)
    return PersistenceError(message, cause=exc)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Run statements on one pooled connection; commit on success, rollback on error."""

    try:
        with conn_factory.connection() as conn:
            cur = conn.cursor(dictionary=dictionary)
            try:
                yield conn, cur
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                cur.close()
    except mysql.connector.Error as exc:
        raise translate_error(exc) from exc


@contextmanager
def db_transaction(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Like ``db_cursor`` but opens an explicit transaction first.

    Every statement issued inside the block commits or rolls back together.
    """

    with db_cursor(conn_factory, dictionary=dictionary) as (conn, cur):
        conn.start_transaction()
        yield conn, cur


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
