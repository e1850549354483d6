from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "admin"
    STAFF = "staff"


class PunchType(str, Enum):
    """Clock event recorded by the time clock."""

    IN = "IN"
    OUT = "OUT"
    BREAK = "BREAK"
    LUNCH = "LUNCH"


# Only IN keeps an interval open; every other type closes it.
WORKING_TYPES = frozenset({PunchType.IN})
