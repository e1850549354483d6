from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..core.enums import WORKING_TYPES, PunchType
from ..punches.model import PunchEvent
from .model import WorkInterval


def reconstruct_intervals(
    punches: Iterable[PunchEvent],
    *,
    carry_in: Optional[PunchType],
    window_start: datetime,
    window_end: datetime,
) -> list[WorkInterval]:
    """Turn an ordered punch stream into worked intervals inside the window.

    ``carry_in`` is the type of the last punch before ``window_start``; when it
    is IN, work is treated as already in progress at ``window_start``. The
    first IN opens an interval and repeated INs are ignored until a closing
    punch (OUT, BREAK or LUNCH). A still-open interval is closed at
    ``window_end``, so a worker clocked in across several windows is capped
    at each window's bounds independently. Zero-length intervals are dropped.
    """
    intervals: list[WorkInterval] = []
    open_start: Optional[datetime] = window_start if carry_in in WORKING_TYPES else None

    for punch in punches:
        if punch.type in WORKING_TYPES:
            if open_start is None:
                open_start = punch.occurred_at
        elif open_start is not None:
            if punch.occurred_at > open_start:
                intervals.append(WorkInterval(start=open_start, end=punch.occurred_at))
            open_start = None

    if open_start is not None and window_end > open_start:
        intervals.append(WorkInterval(start=open_start, end=window_end))

    return intervals
