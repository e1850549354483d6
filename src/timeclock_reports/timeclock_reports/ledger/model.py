from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.constants import DEFAULT_OVERTIME_THRESHOLD_HOURS, DEFAULT_WEEK_STARTS_ON


@dataclass(frozen=True)
class WorkInterval:
    """Reconstructed ``[start, end)`` span of continuous IN status."""

    start: datetime
    end: datetime

    @property
    def minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60


@dataclass(frozen=True)
class DaySummary:
    date: str
    minutes: float
    hours_decimal: float
    hours_formatted: str
    first_in: Optional[datetime] = None
    last_out: Optional[datetime] = None


@dataclass(frozen=True)
class EmployeeHoursSummary:
    employee_id: str
    name: str
    days: tuple[DaySummary, ...] = ()
    # Sum of already-rounded daily minutes.
    total_minutes: float = 0


@dataclass(frozen=True)
class WeekPayBucket:
    week_start: str
    total_minutes: float
    regular_minutes: float
    overtime_minutes: float
    regular_pay: float
    overtime_pay: float

    @property
    def total_pay(self) -> float:
        return self.regular_pay + self.overtime_pay


@dataclass(frozen=True)
class ReportWindow:
    """Caller-supplied report parameters; never persisted."""

    start: date
    end: date
    tz_offset_minutes: int = 0
    round_minutes: int = 0
    week_starts_on: int = DEFAULT_WEEK_STARTS_ON
    overtime_threshold_hours: float = DEFAULT_OVERTIME_THRESHOLD_HOURS
    include_in_out_times: bool = field(default=False, compare=False)
