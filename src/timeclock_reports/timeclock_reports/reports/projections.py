"""JSON-ready views of the canonical summaries.

Each report projects only the fields it needs from ``EmployeeHoursSummary``.
"""
from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import to_iso_utc
from ..core.constants import OVERTIME_MULTIPLIER
from ..ledger.model import DaySummary, EmployeeHoursSummary, ReportWindow, WeekPayBucket
from ..ledger.rounding import format_hours_minutes, round_cents, to_hours_decimal
from ..punches.model import AuditPunchRow
from ..tips.model import EmployeeTip


def _num(value: float):
    """480.0 -> 480 so JSON matches what clients already parse."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def report_header(window: ReportWindow, *, payroll: bool = False) -> dict:
    header = {
        "range": {"from": window.start.isoformat(), "to": window.end.isoformat()},
        "roundMinutes": window.round_minutes,
    }
    if payroll:
        header["weekStartsOn"] = window.week_starts_on
        header["overtimeThreshold"] = _num(window.overtime_threshold_hours)
        header["overtimeMultiplier"] = OVERTIME_MULTIPLIER
    return header


def project_day(day: DaySummary, *, include_in_out: bool = False) -> dict:
    out = {
        "date": day.date,
        "minutes": _num(day.minutes),
        "hoursDecimal": day.hours_decimal,
        "hoursFormatted": day.hours_formatted,
    }
    if include_in_out:
        out["firstIn"] = to_iso_utc(day.first_in) if day.first_in else None
        out["lastOut"] = to_iso_utc(day.last_out) if day.last_out else None
    return out


def _totals(summary: EmployeeHoursSummary) -> dict:
    return {
        "id": summary.employee_id,
        "name": summary.name,
        "totalMinutes": _num(summary.total_minutes),
        "totalHoursDecimal": to_hours_decimal(summary.total_minutes),
        "totalHoursFormatted": format_hours_minutes(summary.total_minutes),
    }


def project_hours_employee(summary: EmployeeHoursSummary, *, include_in_out: bool = False) -> dict:
    out = _totals(summary)
    out["days"] = [project_day(d, include_in_out=include_in_out) for d in summary.days]
    return out


def project_week(week: WeekPayBucket) -> dict:
    return {
        "weekStart": week.week_start,
        "totalMinutes": _num(week.total_minutes),
        "totalHoursFormatted": format_hours_minutes(week.total_minutes),
        "totalHoursDecimal": to_hours_decimal(week.total_minutes),
        "regularMinutes": _num(week.regular_minutes),
        "regularHoursFormatted": format_hours_minutes(week.regular_minutes),
        "overtimeMinutes": _num(week.overtime_minutes),
        "overtimeHoursFormatted": format_hours_minutes(week.overtime_minutes),
        "regularPay": week.regular_pay,
        "overtimePay": week.overtime_pay,
        "totalPay": week.total_pay,
    }


def project_payroll_employee(
    summary: EmployeeHoursSummary,
    *,
    hourly_rate: float,
    weeks: Sequence[WeekPayBucket],
    total_pay: float,
) -> dict:
    out = _totals(summary)
    out["hourlyRate"] = hourly_rate
    out["totalPay"] = total_pay
    out["weeks"] = [project_week(w) for w in weeks]
    return out


def project_audit_row(row: AuditPunchRow) -> dict:
    return {
        "id": row.punch_id,
        "employeeName": row.employee_name,
        "office": row.office_name,
        "group": row.group_name,
        "type": row.type.value,
        "occurredAt": to_iso_utc(row.occurred_at),
        "notes": row.notes or "",
    }


def project_tip_day(tip: EmployeeTip) -> dict:
    cash = round_cents(tip.cash_tips)
    card = round_cents(tip.credit_card_tips)
    return {
        "date": tip.work_date.isoformat(),
        "cashTips": cash,
        "creditCardTips": card,
        "totalTips": round_cents(cash + card),
    }
