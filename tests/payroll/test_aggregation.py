from datetime import date

import pytest

from src.hours_tracker.hours_tracker.entries.model import DailyEntry
from src.hours_tracker.hours_tracker.payroll.aggregation import (
    daily_hours,
    entries_in_period,
    period_earnings,
    period_hours,
    shift_hours,
)
from src.hours_tracker.hours_tracker.payroll.period import Period
from src.hours_tracker.hours_tracker.shifts.model import Shift


def _entry(d: date, *spans, comment=None) -> DailyEntry:
    shifts = tuple(Shift(shift_id=f"s{i}", start_time=a, end_time=b) for i, (a, b) in enumerate(spans))
    return DailyEntry(work_date=d, shifts=shifts, comment=comment)


JUNE = Period(2024, 6)


def test_daily_hours_is_sum_of_shift_durations():
    entry = _entry(date(2024, 6, 3), ("06:00", "10:00"), ("14:00", "18:30"), ("23:00", "01:00"))
    assert daily_hours(entry) == sum(shift_hours(s) for s in entry.shifts) == 10.5


def test_daily_hours_accepts_plain_shift_list():
    assert daily_hours([Shift("a", "08:00", "12:00")]) == 4.0


def test_daily_hours_without_shifts_is_zero():
    assert daily_hours(_entry(date(2024, 6, 3), comment="sick")) == 0
    assert daily_hours([]) == 0


def test_half_filled_shift_does_not_break_the_day():
    entry = _entry(date(2024, 6, 3), ("08:00", "12:00"), ("13:00", None))
    assert daily_hours(entry) == 4.0


def test_reference_scenario():
    entries = [
        _entry(date(2024, 6, 1), ("08:00", "16:00")),
        _entry(date(2024, 6, 2), ("22:00", "06:00")),
    ]
    assert period_hours(entries, JUNE) == 16
    assert period_earnings(entries, JUNE, 10) == 160.0


def test_entries_outside_month_do_not_contribute():
    entries = [
        _entry(date(2024, 5, 31), ("08:00", "16:00")),
        _entry(date(2024, 6, 1), ("08:00", "10:00")),
        _entry(date(2024, 6, 30), ("08:00", "09:00")),
        _entry(date(2024, 7, 1), ("08:00", "16:00")),
        _entry(date(2023, 6, 15), ("08:00", "16:00")),
    ]
    assert period_hours(entries, JUNE) == 3.0


def test_entries_in_period_sorted_ascending():
    entries = [
        _entry(date(2024, 6, 20), ("08:00", "09:00")),
        _entry(date(2024, 6, 2), ("08:00", "09:00")),
        _entry(date(2024, 7, 1), ("08:00", "09:00")),
    ]
    assert [e.work_date.day for e in entries_in_period(entries, JUNE)] == [2, 20]


@pytest.mark.parametrize("rate", [0, 9.0, 12.5])
def test_earnings_are_hours_times_rate(rate):
    entries = [
        _entry(date(2024, 6, 4), ("07:10", "15:25")),
        _entry(date(2024, 6, 5), ("21:45", "05:05")),
    ]
    assert period_earnings(entries, JUNE, rate) == period_hours(entries, JUNE) * rate


def test_empty_month_has_no_hours():
    assert period_hours([], JUNE) == 0
    assert period_earnings([], JUNE, 9.0) == 0
