from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee (only the fields reports need)."""

    employee_id: str
    full_name: str
    display_name: Optional[str] = None
    hourly_rate: Optional[float] = None
    office_id: Optional[str] = None
    group_id: Optional[str] = None
    is_server: bool = False

    @property
    def name(self) -> str:
        return self.display_name or self.full_name


@dataclass(frozen=True)
class EmployeeFilter:
    employee_id: Optional[str] = None
    # Matches the office and employees with no office assigned.
    office_id: Optional[str] = None
    group_id: Optional[str] = None
    servers_only: bool = False
