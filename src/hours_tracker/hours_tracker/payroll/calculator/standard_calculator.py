from __future__ import annotations

from .base import HoursCalculator
from ...common.datetime_utils import parse_time_of_day
from ...core.constants import MINUTES_PER_DAY
from ...shifts.model import Shift


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: end - start, plus one day when the shift crosses midnight.

    A missing or malformed time counts as a 0-minute shift. Equal start and
    end is 0 minutes, never a full day, so a shift is always under 24 hours.
    """

    def shift_minutes(self, shift: Shift) -> int:
        start = parse_time_of_day(shift.start_time)
        end = parse_time_of_day(shift.end_time)
        if start is None or end is None:
            return 0

        minutes = end - start
        if minutes < 0:
            minutes += MINUTES_PER_DAY
        return minutes
