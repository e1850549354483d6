from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee, EmployeeFilter


class EmployeeRepository(Protocol):
    def list_employees(self, *, tenant_id: str, filters: EmployeeFilter) -> Sequence[Employee]:
        """Employees matching ``filters``, ordered by full name."""

        raise NotImplementedError
