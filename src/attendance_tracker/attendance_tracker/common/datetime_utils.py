from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def utc_timestamp() -> str:
    return now_utc().isoformat()


def to_iso(value: Optional[Union[date, datetime]]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()
