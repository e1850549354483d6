from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def round_cents(value: float) -> float:
    return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def round_minutes(minutes: float, step: int) -> float:
    """Round one day's minutes to the configured step.

    ``step == 0`` keeps the minutes, rounded to 2 decimals. Otherwise snaps to
    the nearest multiple of ``step`` (halves away from zero).
    """
    if not step:
        return round_cents(minutes)
    units = Decimal(repr(minutes)) / Decimal(step)
    return float(units.quantize(Decimal(1), rounding=ROUND_HALF_UP) * step)


def to_hours_decimal(minutes: float) -> float:
    return round_cents(minutes / 60)


def format_hours_minutes(minutes: float) -> str:
    """``H:MM``; negative totals format with the same floor/mod rule."""
    rounded = math.floor(minutes + 0.5)
    hours = math.floor(rounded / 60)
    return f"{hours}:{abs(rounded) % 60:02d}"
