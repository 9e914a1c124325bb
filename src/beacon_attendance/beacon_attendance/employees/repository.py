from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only view of the employee-management store.

    Every lookup only considers active employees.
    """

    def get_active_by_identifier(self, identifier: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_active_by_name(self, name: str) -> Optional[Employee]:
        """Case-insensitive match on the display name."""

        raise NotImplementedError

    def count_active(self) -> int:
        raise NotImplementedError
