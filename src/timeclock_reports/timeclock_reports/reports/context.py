from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import window_bounds
from ..core.enums import PunchType
from ..employees.model import Employee, EmployeeFilter
from ..employees.repository import EmployeeRepository
from ..ledger.model import ReportWindow
from ..punches.model import PunchEvent
from ..punches.repository import PunchRepository


@dataclass(frozen=True)
class PunchContext:
    """Immutable snapshot of everything the engine needs for one window."""

    employees: Sequence[Employee]
    window_start: datetime
    window_end: datetime
    punches_by_employee: Mapping[str, Sequence[PunchEvent]] = field(default_factory=dict)
    last_before: Mapping[str, PunchEvent] = field(default_factory=dict)

    def punches_for(self, employee_id: str) -> Sequence[PunchEvent]:
        return self.punches_by_employee.get(employee_id, ())

    def carry_in_for(self, employee_id: str) -> Optional[PunchType]:
        last = self.last_before.get(employee_id)
        return last.type if last else None


class PunchContextLoader:
    """Fetches employees, in-window punches and carry-in punches in bulk."""

    def __init__(self, punches: PunchRepository, employees: EmployeeRepository):
        self._punches = punches
        self._employees = employees

    def load(self, *, tenant_id: str, window: ReportWindow, filters: EmployeeFilter) -> PunchContext:
        window_start, window_end = window_bounds(window.start, window.end, window.tz_offset_minutes)
        employees = list(self._employees.list_employees(tenant_id=tenant_id, filters=filters))
        if not employees:
            return PunchContext(employees=[], window_start=window_start, window_end=window_end)

        employee_ids = [e.employee_id for e in employees]
        in_range = self._punches.list_in_range(
            tenant_id=tenant_id,
            employee_ids=employee_ids,
            start=window_start,
            end=window_end,
        )
        last_before = self._punches.last_before(tenant_id=tenant_id, employee_ids=employee_ids, start=window_start)

        grouped: dict[str, list[PunchEvent]] = defaultdict(list)
        for punch in in_range:
            grouped[punch.employee_id].append(punch)

        return PunchContext(
            employees=employees,
            window_start=window_start,
            window_end=window_end,
            punches_by_employee=dict(grouped),
            last_before=dict(last_before),
        )
