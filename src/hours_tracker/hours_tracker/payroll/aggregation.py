"""Pure hour/earnings aggregation over daily entries.

All functions are deterministic and side-effect free; the module-level
helpers use the standard calculator unless one is passed in.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from ..entries.model import DailyEntry
from ..shifts.model import Shift
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator
from .period import Period

_default_calculator = StandardHoursCalculator()


def shift_hours(shift: Shift, *, calculator: Optional[HoursCalculator] = None) -> float:
    return (calculator or _default_calculator).shift_hours(shift)


def daily_hours(
    entry: Union[DailyEntry, Iterable[Shift]],
    *,
    calculator: Optional[HoursCalculator] = None,
) -> float:
    return (calculator or _default_calculator).daily_hours(entry)


def entries_in_period(entries: Iterable[DailyEntry], period: Period) -> list[DailyEntry]:
    """Entries dated inside the month, ascending by date."""
    selected = [e for e in entries if period.contains(e.work_date)]
    selected.sort(key=lambda e: e.work_date)
    return selected


def period_hours(
    entries: Iterable[DailyEntry],
    period: Period,
    *,
    calculator: Optional[HoursCalculator] = None,
) -> float:
    calc = calculator or _default_calculator
    return sum((calc.daily_hours(e) for e in entries_in_period(entries, period)), 0.0)


def period_earnings(
    entries: Iterable[DailyEntry],
    period: Period,
    rate: float,
    *,
    calculator: Optional[HoursCalculator] = None,
) -> float:
    # One rate for the whole period, applied to the total.
    return period_hours(entries, period, calculator=calculator) * rate
