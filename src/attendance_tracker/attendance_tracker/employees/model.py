from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee, identified by an externally assigned id."""

    emp_id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "emp_id": self.emp_id,
            "name": self.name,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }
