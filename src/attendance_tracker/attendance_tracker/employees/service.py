from __future__ import annotations

from typing import Any, Sequence

from ..common.validators import require_max_length, require_non_empty
from ..core.constants import MAX_EMP_ID_LENGTH, MAX_NAME_LENGTH
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: list and upsert employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def upsert_employee(self, *, emp_id: Any, name: Any) -> str:
        emp_id = require_max_length(require_non_empty(emp_id, "Employee ID"), "Employee ID", MAX_EMP_ID_LENGTH)
        name = require_max_length(require_non_empty(name, "Name"), "Name", MAX_NAME_LENGTH)
        return self._employees.upsert(emp_id=emp_id, name=name)
