from src.hours_tracker.hours_tracker.common.datetime_utils import format_time_of_day
from src.hours_tracker.hours_tracker.payroll.calculator.standard_calculator import StandardHoursCalculator
from src.hours_tracker.hours_tracker.shifts.model import Shift


def _hours(start, end) -> float:
    return StandardHoursCalculator().shift_hours(Shift(shift_id="s", start_time=start, end_time=end))


def test_day_shift_hours():
    assert _hours("08:00", "16:30") == 8.5


def test_overnight_shift_wraps_past_midnight():
    assert _hours("22:00", "06:00") == 8.0


def test_equal_start_and_end_is_zero_not_full_day():
    assert _hours("07:15", "07:15") == 0
    assert _hours("00:00", "00:00") == 0


def test_missing_or_malformed_times_count_as_zero():
    assert _hours(None, "16:00") == 0
    assert _hours("08:00", None) == 0
    assert _hours("", "16:00") == 0
    assert _hours("8am", "16:00") == 0
    assert _hours("24:00", "16:00") == 0
    assert _hours("08:60", "16:00") == 0


def test_seconds_are_ignored():
    assert _hours("08:00:59", "09:30:00") == 1.5


def test_single_digit_hour_is_accepted():
    assert _hours("8:00", "9:45") == 1.75


def test_duration_always_below_24_hours():
    calc = StandardHoursCalculator()
    times = [format_time_of_day(m) for m in range(0, 24 * 60, 17)]
    for start in times:
        for end in times:
            hours = calc.shift_hours(Shift(shift_id="s", start_time=start, end_time=end))
            assert 0 <= hours < 24


def test_latest_possible_overnight_shift():
    assert StandardHoursCalculator().shift_minutes(Shift(shift_id="s", start_time="00:01", end_time="00:00")) == 24 * 60 - 1
