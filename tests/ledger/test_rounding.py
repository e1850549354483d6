from __future__ import annotations

import pytest

from timeclock_reports.ledger.rounding import format_hours_minutes, round_minutes, to_hours_decimal


def test_step_15_rounds_37_down_to_30():
    assert round_minutes(37, 15) == 30


def test_half_step_rounds_away_from_zero():
    assert round_minutes(7.5, 15) == 15
    assert round_minutes(22.5, 15) == 30


def test_step_zero_keeps_two_decimals():
    assert round_minutes(12.3456, 0) == 12.35
    assert round_minutes(1439.9999833333333, 0) == 1440


@pytest.mark.parametrize("step", [0, 5, 10, 15, 20, 30])
@pytest.mark.parametrize("raw", [0, 1.005, 7.5, 37, 59.99, 481.2, 1439.99998])
def test_rounding_is_idempotent(step, raw):
    once = round_minutes(raw, step)

    assert round_minutes(once, step) == once


def test_hours_decimal_two_places():
    assert to_hours_decimal(480) == 8.0
    assert to_hours_decimal(50) == 0.83
    assert to_hours_decimal(45) == 0.75


def test_format_hours_minutes():
    assert format_hours_minutes(480) == "8:00"
    assert format_hours_minutes(65) == "1:05"
    assert format_hours_minutes(59.6) == "1:00"
    assert format_hours_minutes(0) == "0:00"


def test_format_negative_minutes_does_not_raise():
    assert format_hours_minutes(-90) == "-2:30"
    assert format_hours_minutes(-30) == "-1:30"
