from __future__ import annotations

from typing import Optional, Sequence

from ..ledger.model import DaySummary, WeekPayBucket
from .calculator.base import PayCalculator
from .calculator.weekly_overtime_calculator import WeeklyOvertimeCalculator
from .weeks import minutes_by_week


def build_week_buckets(
    days: Sequence[DaySummary],
    *,
    week_starts_on: int,
    hourly_rate: float,
    calculator: Optional[PayCalculator] = None,
) -> list[WeekPayBucket]:
    """Group rounded days into weeks (ascending) and price each week."""
    calculator = calculator or WeeklyOvertimeCalculator()
    return [
        calculator.week_pay(week_start=week_start, minutes=minutes, hourly_rate=hourly_rate)
        for week_start, minutes in minutes_by_week(days, week_starts_on)
    ]


def total_pay(weeks: Sequence[WeekPayBucket]) -> float:
    return sum(week.total_pay for week in weeks)
