from __future__ import annotations

import math
from datetime import date
from typing import Optional

from ..core.constants import (
    ALLOWED_ROUND_MINUTES,
    ALLOWED_WEEK_STARTS,
    DEFAULT_AUDIT_LIMIT,
    DEFAULT_OVERTIME_THRESHOLD_HOURS,
    DEFAULT_WEEK_STARTS_ON,
    MAX_AUDIT_LIMIT,
)
from ..core.enums import PunchType
from ..core.exceptions import InvalidWindowError
from .datetime_utils import parse_iso_date


def _to_number(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def require_window(from_value: Optional[str], to_value: Optional[str]) -> tuple[date, date]:
    if not from_value or not to_value:
        raise InvalidWindowError("from and to are required (YYYY-MM-DD)")
    start = parse_iso_date(from_value, "from")
    end = parse_iso_date(to_value, "to")
    if start > end:
        raise InvalidWindowError("from must not be after to")
    return start, end


def coerce_round_minutes(value) -> int:
    """Unknown rounding steps fall back to 0 (no bucketing) instead of failing."""
    number = _to_number(value)
    if number is None or not number.is_integer() or int(number) not in ALLOWED_ROUND_MINUTES:
        return 0
    return int(number)


def coerce_tz_offset(value) -> int:
    number = _to_number(value)
    if number is None:
        return 0
    return int(number)


def coerce_week_starts_on(value) -> int:
    number = _to_number(value)
    if number is None or not number.is_integer() or int(number) not in ALLOWED_WEEK_STARTS:
        return DEFAULT_WEEK_STARTS_ON
    return int(number)


def coerce_overtime_threshold(value) -> float:
    number = _to_number(value)
    if not number:
        return DEFAULT_OVERTIME_THRESHOLD_HOURS
    return number


def coerce_punch_type(value) -> Optional[PunchType]:
    try:
        return PunchType(str(value).strip().upper()) if value else None
    except ValueError:
        return None


def coerce_audit_limit(value, *, max_limit: int = MAX_AUDIT_LIMIT) -> int:
    number = _to_number(value)
    if number is None or number <= 0:
        return DEFAULT_AUDIT_LIMIT
    return min(int(number), int(max_limit))


def optional_id(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None
