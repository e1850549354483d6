from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..common.datetime_utils import as_utc
from ..core.constants import DEFAULT_ROUNDING_MINUTES, DEFAULT_TIMEZONE


@dataclass(frozen=True)
class TenantSettings:
    timezone: str = DEFAULT_TIMEZONE
    rounding_minutes: int = DEFAULT_ROUNDING_MINUTES
    reports_enabled: bool = True

    def offset_minutes_at(self, instant: datetime) -> int:
        """Fixed UTC offset of the tenant timezone at ``instant``.

        Unknown zone names fall back to UTC.
        """
        try:
            zone = ZoneInfo(self.timezone or "UTC")
        except (ZoneInfoNotFoundError, ValueError):
            return 0
        offset = as_utc(instant).astimezone(zone).utcoffset()
        return int(offset.total_seconds() // 60) if offset else 0
