from __future__ import annotations

import re
from collections import defaultdict
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import ONE_MINUTE, day_key, next_local_midnight
from ..core.constants import AUTO_SCHEDULE_OUT_TOKEN, PENALTY_MINUTES_PATTERN
from ..core.enums import PunchType
from ..punches.model import PunchEvent
from .model import WorkInterval

_PENALTY_RE = re.compile(PENALTY_MINUTES_PATTERN, re.IGNORECASE)


def split_by_local_day(interval: WorkInterval, offset_minutes: int) -> list[tuple[str, float]]:
    """Split an interval at local midnights into ``(day_key, minutes)`` pairs.

    Uses a fixed minute offset (no daylight-saving transitions). The pairs sum
    to the interval's duration.
    """
    pieces: list[tuple[str, float]] = []
    cursor = interval.start
    while cursor < interval.end:
        segment_end = min(interval.end, next_local_midnight(cursor, offset_minutes))
        pieces.append((day_key(cursor, offset_minutes), (segment_end - cursor) / ONE_MINUTE))
        cursor = segment_end
    return pieces


def minutes_by_day(intervals: Iterable[WorkInterval], offset_minutes: int) -> dict[str, float]:
    totals: dict[str, float] = defaultdict(float)
    for interval in intervals:
        for key, minutes in split_by_local_day(interval, offset_minutes):
            totals[key] += minutes
    return dict(totals)


def punches_by_day(punches: Iterable[PunchEvent], offset_minutes: int) -> dict[str, list[PunchEvent]]:
    grouped: dict[str, list[PunchEvent]] = defaultdict(list)
    for punch in punches:
        grouped[day_key(punch.occurred_at, offset_minutes)].append(punch)
    return dict(grouped)


def penalty_minutes(punch: PunchEvent) -> int:
    """Penalty attached by the automatic clock-out (0 when none)."""
    if punch.type != PunchType.OUT or not punch.notes:
        return 0
    if AUTO_SCHEDULE_OUT_TOKEN not in punch.notes:
        return 0
    match = _PENALTY_RE.search(punch.notes)
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def penalties_by_day(grouped: dict[str, list[PunchEvent]]) -> dict[str, int]:
    result: dict[str, int] = {}
    for key, day_punches in grouped.items():
        total = sum(penalty_minutes(p) for p in day_punches)
        if total:
            result[key] = total
    return result


def first_in_last_out(day_punches: Sequence[PunchEvent]) -> tuple[Optional[datetime], Optional[datetime]]:
    """Literal first IN and last non-IN punch of a day.

    Read from the raw punches, not from reconstructed intervals.
    """
    first_in = next((p.occurred_at for p in day_punches if p.type == PunchType.IN), None)
    last_out = next((p.occurred_at for p in reversed(day_punches) if p.type != PunchType.IN), None)
    return first_in, last_out
