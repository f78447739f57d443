from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..shifts.model import Shift


@dataclass(frozen=True)
class DailyEntry:
    """Domain entity: all shifts and the optional comment for one date."""

    work_date: date
    shifts: tuple[Shift, ...] = field(default_factory=tuple)
    comment: Optional[str] = None
    entry_id: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """An entry without shifts and without a comment does not exist."""
        return not self.shifts and not (self.comment or "").strip()

    def find_shift(self, shift_id: str) -> Optional[Shift]:
        for s in self.shifts:
            if s.shift_id == shift_id:
                return s
        return None
