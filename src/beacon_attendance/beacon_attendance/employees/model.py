from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee as seen by attendance.

    Note: Records are owned by the employee-management service; attendance
    only reads them.
    """

    employee_id: int
    name: str
    identifier: str
    is_active: bool = True
    role: Optional[str] = None
    department: Optional[str] = None
    emp_id: Optional[str] = None

    def display(self) -> dict:
        return {
            "employee_name": self.name,
            "employee_role": self.role,
            "employee_department": self.department,
            "employee_emp_id": self.emp_id,
        }
