from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Union

from ...core.constants import MINUTES_PER_HOUR
from ...entries.model import DailyEntry
from ...shifts.model import Shift


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def shift_minutes(self, shift: Shift) -> int:
        raise NotImplementedError

    def shift_hours(self, shift: Shift) -> float:
        return self.shift_minutes(shift) / MINUTES_PER_HOUR

    def daily_hours(self, entry: Union[DailyEntry, Iterable[Shift]]) -> float:
        shifts = entry.shifts if isinstance(entry, DailyEntry) else entry
        return sum((self.shift_hours(s) for s in shifts), 0.0)
