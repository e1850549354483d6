from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime, time, timezone
from typing import Callable, Optional

from ..common.datetime_utils import window_bounds
from ..common.validators import coerce_round_minutes
from ..core.constants import (
    DEFAULT_AUDIT_LIMIT,
    DEFAULT_OVERTIME_THRESHOLD_HOURS,
    DEFAULT_WEEK_STARTS_ON,
    MAX_AUDIT_LIMIT,
)
from ..core.enums import PunchType
from ..core.exceptions import InvalidWindowError, ReportsDisabledError
from ..employees.model import Employee, EmployeeFilter
from ..employees.repository import EmployeeRepository
from ..ledger.model import EmployeeHoursSummary, ReportWindow
from ..ledger.rounding import round_cents
from ..ledger.summary import build_daily_summary
from ..payroll.calculator.base import PayCalculator
from ..payroll.calculator.weekly_overtime_calculator import WeeklyOvertimeCalculator
from ..payroll.service import build_week_buckets, total_pay
from ..punches.repository import PunchRepository
from ..settings.model import TenantSettings
from ..settings.repository import SettingsRepository
from ..tips.model import EmployeeTip
from ..tips.repository import TipRepository
from .context import PunchContext, PunchContextLoader
from .projections import (
    project_audit_row,
    project_hours_employee,
    project_payroll_employee,
    project_tip_day,
    report_header,
)

logger = logging.getLogger(__name__)


class ReportService:
    """Use cases: hours, daily, payroll, audit and tips reports.

    This is the caller of the ledger engine: it refuses to run when the
    tenant has reports disabled, resolves defaults from tenant settings and
    hands the engine an explicit window and punch snapshot.
    """

    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        settings: SettingsRepository,
        tips: Optional[TipRepository] = None,
        *,
        calculator_factory: Callable[[float], PayCalculator] = WeeklyOvertimeCalculator,
        max_audit_limit: int = MAX_AUDIT_LIMIT,
    ):
        self._punches = punches
        self._employees = employees
        self._settings = settings
        self._tips = tips
        self._loader = PunchContextLoader(punches, employees)
        self._calculator_factory = calculator_factory
        self._max_audit_limit = int(max_audit_limit)

    def _require_reports(self, tenant_id: str) -> TenantSettings:
        settings = self._settings.get_for_tenant(tenant_id)
        if settings is None:
            # No row yet: reports default to enabled.
            return TenantSettings()
        if not settings.reports_enabled:
            logger.info("Reports refused for tenant %s: reports are disabled", tenant_id)
            raise ReportsDisabledError("Reports are disabled.")
        return settings

    @staticmethod
    def _check_range(start: date, end: date) -> None:
        if start > end:
            raise InvalidWindowError("from must not be after to")

    def _build_window(
        self,
        settings: TenantSettings,
        *,
        start: date,
        end: date,
        round_minutes: Optional[int],
        tz_offset: Optional[int],
        week_starts_on: int = DEFAULT_WEEK_STARTS_ON,
        overtime_threshold: float = DEFAULT_OVERTIME_THRESHOLD_HOURS,
        include_in_out_times: bool = False,
    ) -> ReportWindow:
        self._check_range(start, end)
        if round_minutes is None:
            round_minutes = settings.rounding_minutes
        if tz_offset is None:
            tz_offset = settings.offset_minutes_at(datetime.combine(start, time(0), tzinfo=timezone.utc))
        return ReportWindow(
            start=start,
            end=end,
            tz_offset_minutes=int(tz_offset),
            round_minutes=coerce_round_minutes(round_minutes),
            week_starts_on=week_starts_on,
            overtime_threshold_hours=overtime_threshold,
            include_in_out_times=include_in_out_times,
        )

    @staticmethod
    def _summarize(
        context: PunchContext,
        window: ReportWindow,
        employee: Employee,
    ) -> EmployeeHoursSummary:
        days, total_minutes = build_daily_summary(
            context.punches_for(employee.employee_id),
            carry_in=context.carry_in_for(employee.employee_id),
            window_start=context.window_start,
            window_end=context.window_end,
            offset_minutes=window.tz_offset_minutes,
            round_to=window.round_minutes,
            include_in_out_times=window.include_in_out_times,
        )
        return EmployeeHoursSummary(
            employee_id=employee.employee_id,
            name=employee.name,
            days=tuple(days),
            total_minutes=total_minutes,
        )

    def _load(self, tenant_id: str, window: ReportWindow, filters: EmployeeFilter) -> PunchContext:
        context = self._loader.load(tenant_id=tenant_id, window=window, filters=filters)
        logger.debug(
            "Report window %s..%s (%s..%s UTC, offset %s) for %d employee(s)",
            window.start,
            window.end,
            context.window_start.isoformat(),
            context.window_end.isoformat(),
            window.tz_offset_minutes,
            len(context.employees),
        )
        return context

    def _hours_like_report(
        self,
        *,
        tenant_id: str,
        start: date,
        end: date,
        filters: Optional[EmployeeFilter],
        round_minutes: Optional[int],
        tz_offset: Optional[int],
        include_in_out_times: bool,
    ) -> dict:
        settings = self._require_reports(tenant_id)
        window = self._build_window(
            settings,
            start=start,
            end=end,
            round_minutes=round_minutes,
            tz_offset=tz_offset,
            include_in_out_times=include_in_out_times,
        )
        context = self._load(tenant_id, window, filters or EmployeeFilter())

        report = report_header(window)
        report["employees"] = [
            project_hours_employee(
                self._summarize(context, window, employee),
                include_in_out=window.include_in_out_times,
            )
            for employee in context.employees
        ]
        return report

    def get_hours_report(
        self,
        *,
        tenant_id: str,
        start: date,
        end: date,
        filters: Optional[EmployeeFilter] = None,
        round_minutes: Optional[int] = None,
        tz_offset: Optional[int] = None,
    ) -> dict:
        return self._hours_like_report(
            tenant_id=tenant_id,
            start=start,
            end=end,
            filters=filters,
            round_minutes=round_minutes,
            tz_offset=tz_offset,
            include_in_out_times=False,
        )

    def get_daily_report(
        self,
        *,
        tenant_id: str,
        start: date,
        end: date,
        filters: Optional[EmployeeFilter] = None,
        round_minutes: Optional[int] = None,
        tz_offset: Optional[int] = None,
    ) -> dict:
        """Hours report with literal first IN / last OUT per day."""
        return self._hours_like_report(
            tenant_id=tenant_id,
            start=start,
            end=end,
            filters=filters,
            round_minutes=round_minutes,
            tz_offset=tz_offset,
            include_in_out_times=True,
        )

    def get_payroll_report(
        self,
        *,
        tenant_id: str,
        start: date,
        end: date,
        filters: Optional[EmployeeFilter] = None,
        round_minutes: Optional[int] = None,
        tz_offset: Optional[int] = None,
        week_starts_on: int = DEFAULT_WEEK_STARTS_ON,
        overtime_threshold: float = DEFAULT_OVERTIME_THRESHOLD_HOURS,
    ) -> dict:
        settings = self._require_reports(tenant_id)
        window = self._build_window(
            settings,
            start=start,
            end=end,
            round_minutes=round_minutes,
            tz_offset=tz_offset,
            week_starts_on=week_starts_on,
            overtime_threshold=overtime_threshold,
        )
        context = self._load(tenant_id, window, filters or EmployeeFilter())
        calculator = self._calculator_factory(window.overtime_threshold_hours)

        employees_out = []
        for employee in context.employees:
            summary = self._summarize(context, window, employee)
            hourly_rate = employee.hourly_rate or 0
            weeks = build_week_buckets(
                summary.days,
                week_starts_on=window.week_starts_on,
                hourly_rate=hourly_rate,
                calculator=calculator,
            )
            employees_out.append(
                project_payroll_employee(summary, hourly_rate=hourly_rate, weeks=weeks, total_pay=total_pay(weeks))
            )

        report = report_header(window, payroll=True)
        report["employees"] = employees_out
        return report

    def get_audit_report(
        self,
        *,
        tenant_id: str,
        start: date,
        end: date,
        filters: Optional[EmployeeFilter] = None,
        tz_offset: int = 0,
        punch_type: Optional[PunchType] = None,
        limit: int = DEFAULT_AUDIT_LIMIT,
    ) -> dict:
        """Raw punches in the window, most recent first; no reconstruction."""
        self._require_reports(tenant_id)
        self._check_range(start, end)
        window_start, window_end = window_bounds(start, end, int(tz_offset or 0))
        limit = int(limit) if limit and int(limit) > 0 else DEFAULT_AUDIT_LIMIT

        rows = self._punches.list_for_audit(
            tenant_id=tenant_id,
            start=window_start,
            end=window_end,
            filters=filters or EmployeeFilter(),
            punch_type=punch_type,
            limit=min(limit, self._max_audit_limit),
        )
        return {"records": [project_audit_row(r) for r in rows]}

    def get_tips_report(
        self,
        *,
        tenant_id: str,
        start: date,
        end: date,
        filters: Optional[EmployeeFilter] = None,
    ) -> dict:
        self._require_reports(tenant_id)
        self._check_range(start, end)
        filters = filters or EmployeeFilter()
        server_filter = EmployeeFilter(
            employee_id=filters.employee_id,
            office_id=filters.office_id,
            group_id=filters.group_id,
            servers_only=True,
        )
        employees = list(self._employees.list_employees(tenant_id=tenant_id, filters=server_filter))

        by_employee: dict[str, list[EmployeeTip]] = defaultdict(list)
        if employees and self._tips is not None:
            for tip in self._tips.list_in_range(
                tenant_id=tenant_id,
                employee_ids=[e.employee_id for e in employees],
                start=start,
                end=end,
            ):
                by_employee[tip.employee_id].append(tip)

        return {
            "range": {"from": start.isoformat(), "to": end.isoformat()},
            "employees": [self._project_tips(e, by_employee.get(e.employee_id, [])) for e in employees],
        }

    @staticmethod
    def _project_tips(employee: Employee, tips: list[EmployeeTip]) -> dict:
        days = [project_tip_day(t) for t in tips]
        cash = sum(d["cashTips"] for d in days)
        card = sum(d["creditCardTips"] for d in days)
        return {
            "id": employee.employee_id,
            "name": employee.name,
            "totalCashTips": round_cents(cash),
            "totalCreditCardTips": round_cents(card),
            "totalTips": round_cents(cash + card),
            "days": days,
        }
