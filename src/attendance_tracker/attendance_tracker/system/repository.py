from __future__ import annotations

from datetime import datetime
from typing import Protocol


class DatabaseProbe(Protocol):
    def current_time(self) -> datetime:
        """Round-trip to the database; raises PersistenceError when unreachable."""

        raise NotImplementedError
