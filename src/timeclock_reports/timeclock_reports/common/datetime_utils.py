from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone

from ..core.exceptions import InvalidWindowError

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

ONE_DAY = timedelta(days=1)
ONE_MINUTE = timedelta(minutes=1)


def parse_iso_date(value: str, field_name: str = "date") -> date:
    """Parse a strict YYYY-MM-DD string into a date."""
    raw = (value or "").strip()
    if not _DATE_KEY_RE.match(raw):
        raise InvalidWindowError(f"{field_name} must be in YYYY-MM-DD format.")
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidWindowError(f"{field_name} is not a valid date.") from None


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC (the DB stores instants in UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def local_day_start(day: date, offset_minutes: int) -> datetime:
    """Absolute instant of local 00:00 on ``day`` (local = UTC + offset)."""
    return datetime.combine(day, time(0), tzinfo=timezone.utc) - timedelta(minutes=offset_minutes)


def window_bounds(start: date, end: date, offset_minutes: int) -> tuple[datetime, datetime]:
    """Window from local ``start`` 00:00:00.000 to local ``end`` 23:59:59.999."""
    range_start = local_day_start(start, offset_minutes)
    range_end = local_day_start(end, offset_minutes) + ONE_DAY - timedelta(milliseconds=1)
    return range_start, range_end


def local_date(instant: datetime, offset_minutes: int) -> date:
    return (as_utc(instant) + timedelta(minutes=offset_minutes)).date()


def day_key(instant: datetime, offset_minutes: int) -> str:
    """Local calendar day key (YYYY-MM-DD) for an absolute instant."""
    return local_date(instant, offset_minutes).isoformat()


def next_local_midnight(instant: datetime, offset_minutes: int) -> datetime:
    return local_day_start(local_date(instant, offset_minutes), offset_minutes) + ONE_DAY


def to_iso_utc(instant: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2026-01-05T09:00:00.000Z."""
    value = as_utc(instant)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
