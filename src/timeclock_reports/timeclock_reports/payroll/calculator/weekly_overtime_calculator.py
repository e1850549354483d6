from __future__ import annotations

from .base import PayCalculator
from ...core.constants import DEFAULT_OVERTIME_THRESHOLD_HOURS, OVERTIME_MULTIPLIER
from ...ledger.model import WeekPayBucket


class WeeklyOvertimeCalculator(PayCalculator):
    """Weekly rule: minutes above ``threshold_hours`` are paid at 1.5x."""

    multiplier = OVERTIME_MULTIPLIER

    def __init__(self, threshold_hours: float = DEFAULT_OVERTIME_THRESHOLD_HOURS):
        self.threshold_hours = threshold_hours

    def week_pay(self, *, week_start: str, minutes: float, hourly_rate: float) -> WeekPayBucket:
        threshold_minutes = self.threshold_hours * 60
        regular = min(minutes, threshold_minutes)
        overtime = max(0, minutes - threshold_minutes)
        return WeekPayBucket(
            week_start=week_start,
            total_minutes=minutes,
            regular_minutes=regular,
            overtime_minutes=overtime,
            regular_pay=(regular / 60) * hourly_rate,
            overtime_pay=(overtime / 60) * hourly_rate * self.multiplier,
        )
