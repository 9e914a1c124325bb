from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, full_name, identifier, is_active, role, department, emp_id"


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_active_by_identifier(self, identifier: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE identifier=%s AND is_active=1
                LIMIT 1
                """,
                (identifier,),
            )
            row = fetchone(cur)
            return self._to_employee(row) if row else None

    def get_active_by_name(self, name: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE LOWER(full_name)=LOWER(%s) AND is_active=1
                ORDER BY employee_id
                LIMIT 1
                """,
                (name,),
            )
            row = fetchone(cur)
            return self._to_employee(row) if row else None

    def count_active(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees WHERE is_active=1")
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    @staticmethod
    def _to_employee(row: dict) -> Employee:
        return Employee(
            employee_id=int(row["employee_id"]),
            name=row["full_name"],
            identifier=row["identifier"],
            is_active=bool(row.get("is_active", True)),
            role=row.get("role"),
            department=row.get("department"),
            emp_id=row.get("emp_id"),
        )
