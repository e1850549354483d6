from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable

from ..core.constants import DEFAULT_WEEK_STARTS_ON
from ..ledger.model import DaySummary


def js_weekday(day: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def week_start_key(date_key: str, week_starts_on: int = DEFAULT_WEEK_STARTS_ON) -> str:
    """Date key of the week start containing ``date_key``.

    Weeks are anchored to the configured weekday, not to the report window,
    so a week at the edge of a window may be partial.
    """
    day = date.fromisoformat(date_key)
    diff = (js_weekday(day) - week_starts_on + 7) % 7
    return (day - timedelta(days=diff)).isoformat()


def minutes_by_week(days: Iterable[DaySummary], week_starts_on: int) -> list[tuple[str, float]]:
    totals: dict[str, float] = defaultdict(float)
    for day in days:
        totals[week_start_key(day.date, week_starts_on)] += day.minutes
    return sorted(totals.items())
