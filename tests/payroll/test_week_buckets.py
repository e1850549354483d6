from datetime import date

import pytest

from timeclock_reports.ledger.summary import build_day_summary
from timeclock_reports.payroll.service import build_week_buckets, total_pay
from timeclock_reports.payroll.weeks import js_weekday, minutes_by_week, week_start_key


def _day(date_key: str, minutes: float):
    return build_day_summary(date_key, minutes, first_in=None, last_out=None)


@pytest.mark.parametrize(
    "date_key, week_starts_on, expected",
    [
        # 2026-01-05 is a Monday.
        ("2026-01-05", 1, "2026-01-05"),
        ("2026-01-11", 1, "2026-01-05"),
        ("2026-01-11", 0, "2026-01-11"),
        ("2026-01-10", 0, "2026-01-04"),
        ("2026-01-04", 1, "2025-12-29"),
    ],
)
def test_week_start_key(date_key, week_starts_on, expected):
    assert week_start_key(date_key, week_starts_on) == expected


def test_js_weekday_counts_from_sunday():
    assert js_weekday(date(2026, 1, 4)) == 0
    assert js_weekday(date(2026, 1, 5)) == 1
    assert js_weekday(date(2026, 1, 10)) == 6


def test_minutes_by_week_sorted_ascending():
    days = [_day("2026-01-12", 60), _day("2026-01-05", 480), _day("2026-01-06", 120)]

    assert minutes_by_week(days, 1) == [("2026-01-05", 600), ("2026-01-12", 60)]


def test_week_buckets_cross_week_boundary():
    # Sunday shift belongs to the Monday-start week before it.
    days = [_day("2026-01-11", 600), _day("2026-01-12", 600)]

    weeks = build_week_buckets(days, week_starts_on=1, hourly_rate=10)

    assert [w.week_start for w in weeks] == ["2026-01-05", "2026-01-12"]
    assert [w.total_minutes for w in weeks] == [600, 600]
    assert all(w.overtime_minutes == 0 for w in weeks)


def test_week_buckets_with_overtime_and_total_pay():
    days = [_day(f"2026-01-0{d}", 540) for d in range(5, 10)]

    weeks = build_week_buckets(days, week_starts_on=1, hourly_rate=20)

    assert len(weeks) == 1
    assert weeks[0].total_minutes == 2700
    assert weeks[0].overtime_minutes == 300
    assert total_pay(weeks) == pytest.approx(950)


def test_empty_days_give_no_weeks():
    weeks = build_week_buckets([], week_starts_on=1, hourly_rate=20)

    assert weeks == []
    assert total_pay(weeks) == 0
