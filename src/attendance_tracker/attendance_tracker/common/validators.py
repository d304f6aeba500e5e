from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(f"{field_name} is required")
    text = str(value).strip()
    if not text:
        raise ValidationError(f"{field_name} is required")
    return text


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_iso_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def optional_iso_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_iso_date(value, field_name)


def require_int(value: Any, field_name: str) -> int:
    text = require_non_empty(value, field_name)
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer")
