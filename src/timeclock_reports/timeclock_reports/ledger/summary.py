from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import PunchType
from ..punches.model import PunchEvent
from .buckets import first_in_last_out, minutes_by_day, penalties_by_day, punches_by_day
from .intervals import reconstruct_intervals
from .model import DaySummary
from .rounding import format_hours_minutes, round_minutes, to_hours_decimal


def build_day_summary(
    date_key: str,
    minutes: float,
    *,
    first_in: Optional[datetime] = None,
    last_out: Optional[datetime] = None,
) -> DaySummary:
    return DaySummary(
        date=date_key,
        minutes=minutes,
        hours_decimal=to_hours_decimal(minutes),
        hours_formatted=format_hours_minutes(minutes),
        first_in=first_in,
        last_out=last_out,
    )


def build_daily_summary(
    punches: Sequence[PunchEvent],
    *,
    carry_in: Optional[PunchType],
    window_start: datetime,
    window_end: datetime,
    offset_minutes: int,
    round_to: int,
    include_in_out_times: bool = False,
) -> tuple[list[DaySummary], float]:
    """Per-day worked minutes for one employee plus their total.

    Rounding happens per day, after penalties; the total is the sum of the
    rounded days, not the rounded sum of raw minutes.
    """
    intervals = reconstruct_intervals(
        punches,
        carry_in=carry_in,
        window_start=window_start,
        window_end=window_end,
    )
    worked = minutes_by_day(intervals, offset_minutes)
    grouped = punches_by_day(punches, offset_minutes)
    penalties = penalties_by_day(grouped)

    days: list[DaySummary] = []
    for key in sorted(set(worked) | set(grouped)):
        adjusted = max(0.0, worked.get(key, 0.0) - penalties.get(key, 0))
        rounded = round_minutes(adjusted, round_to)

        first_in = last_out = None
        if include_in_out_times:
            first_in, last_out = first_in_last_out(grouped.get(key, []))

        days.append(build_day_summary(key, rounded, first_in=first_in, last_out=last_out))

    total_minutes = sum(day.minutes for day in days)
    return days, total_minutes
