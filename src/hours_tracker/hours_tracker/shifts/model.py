from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: one worked interval within a day.

    Times are kept as the 'HH:MM' strings they were entered with (no date
    component). An end earlier than the start means the shift ran past
    midnight.
    """

    shift_id: str
    start_time: Optional[str]
    end_time: Optional[str]
