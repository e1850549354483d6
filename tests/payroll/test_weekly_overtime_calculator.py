import pytest

from timeclock_reports.payroll.calculator.weekly_overtime_calculator import WeeklyOvertimeCalculator


def test_week_over_threshold_splits_regular_and_overtime():
    calc = WeeklyOvertimeCalculator(threshold_hours=40)

    week = calc.week_pay(week_start="2026-01-05", minutes=2700, hourly_rate=20)

    assert week.regular_minutes == 2400
    assert week.overtime_minutes == 300
    assert week.regular_pay == pytest.approx(800)
    # 5h * $20 * 1.5
    assert week.overtime_pay == pytest.approx(150)
    assert week.total_pay == pytest.approx(950)


def test_week_under_threshold_has_no_overtime():
    calc = WeeklyOvertimeCalculator(threshold_hours=40)

    week = calc.week_pay(week_start="2026-01-05", minutes=1800, hourly_rate=15)

    assert week.regular_minutes == 1800
    assert week.overtime_minutes == 0
    assert week.overtime_pay == 0
    assert week.total_pay == pytest.approx(450)


@pytest.mark.parametrize("minutes", [0, 59, 2400, 2401, 3600])
@pytest.mark.parametrize("threshold", [8, 37.5, 40])
def test_regular_plus_overtime_equals_total(minutes, threshold):
    week = WeeklyOvertimeCalculator(threshold_hours=threshold).week_pay(
        week_start="2026-01-05", minutes=minutes, hourly_rate=10
    )

    assert week.regular_minutes + week.overtime_minutes == minutes
    assert week.regular_minutes <= threshold * 60
    assert week.overtime_minutes >= 0


def test_custom_threshold_moves_overtime_start():
    week = WeeklyOvertimeCalculator(threshold_hours=30).week_pay(
        week_start="2026-01-05", minutes=1860, hourly_rate=10
    )

    assert week.overtime_minutes == 60
    assert week.overtime_pay == pytest.approx(15)


def test_zero_rate_yields_zero_pay():
    week = WeeklyOvertimeCalculator().week_pay(week_start="2026-01-05", minutes=3000, hourly_rate=0)

    assert week.total_pay == 0
    assert week.overtime_minutes == 600
