from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

import pytest

from timeclock_reports.core.enums import PunchType
from timeclock_reports.employees.model import Employee, EmployeeFilter
from timeclock_reports.punches.model import AuditPunchRow, PunchEvent
from timeclock_reports.settings.model import TenantSettings
from timeclock_reports.tips.model import EmployeeTip


def utc(year, month, day, hour=0, minute=0, second=0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def punch(employee_id: str, type_: str, at: datetime, notes: Optional[str] = None) -> PunchEvent:
    return PunchEvent(employee_id=employee_id, type=PunchType(type_), occurred_at=at, notes=notes)


def _matches(e: Employee, filters: EmployeeFilter) -> bool:
    if filters.employee_id and e.employee_id != filters.employee_id:
        return False
    if filters.office_id and e.office_id not in (filters.office_id, None):
        return False
    if filters.group_id and e.group_id != filters.group_id:
        return False
    if filters.servers_only and not e.is_server:
        return False
    return True


@dataclass
class InMemoryEmployees:
    employees: list[Employee] = field(default_factory=list)
    last_filters: Optional[EmployeeFilter] = None

    def list_employees(self, *, tenant_id: str, filters: EmployeeFilter):
        self.last_filters = filters
        return sorted((e for e in self.employees if _matches(e, filters)), key=lambda e: e.full_name)


@dataclass
class InMemoryPunches:
    punches: list[PunchEvent] = field(default_factory=list)
    audit_rows: list[AuditPunchRow] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    last_audit_args: Optional[dict] = None

    def list_in_range(self, *, tenant_id, employee_ids, start, end):
        self.calls.append("list_in_range")
        items = [p for p in self.punches if p.employee_id in employee_ids and start <= p.occurred_at <= end]
        return sorted(items, key=lambda p: p.occurred_at)

    def last_before(self, *, tenant_id, employee_ids, start):
        self.calls.append("last_before")
        latest: dict[str, PunchEvent] = {}
        for p in sorted(self.punches, key=lambda p: p.occurred_at):
            if p.employee_id in employee_ids and p.occurred_at < start:
                latest[p.employee_id] = p
        return latest

    def list_for_audit(self, *, tenant_id, start, end, filters, punch_type=None, limit=200):
        self.last_audit_args = {
            "start": start,
            "end": end,
            "filters": filters,
            "punch_type": punch_type,
            "limit": limit,
        }
        rows = [r for r in self.audit_rows if start <= r.occurred_at <= end]
        if punch_type is not None:
            rows = [r for r in rows if r.type == punch_type]
        rows.sort(key=lambda r: r.occurred_at, reverse=True)
        return rows[:limit]


@dataclass
class InMemorySettings:
    settings: Optional[TenantSettings] = None

    def get_for_tenant(self, tenant_id: str):
        return self.settings


@dataclass
class InMemoryTips:
    tips: list[EmployeeTip] = field(default_factory=list)

    def list_in_range(self, *, tenant_id, employee_ids, start: date, end: date):
        items = [t for t in self.tips if t.employee_id in employee_ids and start <= t.work_date <= end]
        return sorted(items, key=lambda t: (t.employee_id, t.work_date))


@pytest.fixture
def utc_settings() -> InMemorySettings:
    return InMemorySettings(TenantSettings(timezone="UTC", rounding_minutes=0, reports_enabled=True))
