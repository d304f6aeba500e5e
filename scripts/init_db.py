from __future__ import annotations

import importlib
import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.database.bootstrap import ensure_schema
from src.attendance_tracker.attendance_tracker.database.connection import DatabaseConnection
from src.attendance_tracker.attendance_tracker.main import db_config_from_settings


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = db_config_from_settings({key: getattr(settings, key) for key in dir(settings) if key.isupper()})

    conn = DatabaseConnection(db_config)
    try:
        status = ensure_schema(conn)
    finally:
        conn.close()

    if not status.ready:
        raise SystemExit(f"FAILED: schema not ready on {db_config.describe()}: {status.error}")
    print(f"OK: Applied schema.sql -> {db_config.describe()} (tables={len(status.tables)})")


if __name__ == "__main__":
    main()
