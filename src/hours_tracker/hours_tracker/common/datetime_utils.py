from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional

from ..core.constants import MINUTES_PER_HOUR

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: Any) -> Optional[int]:
    """Parse 'HH:MM' (or 'HH:MM:SS') into minutes since midnight.

    Returns None for missing or malformed values instead of raising, so callers
    can decide whether that is an error. Seconds are accepted and ignored.
    """

    if not isinstance(value, str):
        return None

    m = _TIME_RE.match(value.strip())
    if not m:
        return None

    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3)) if m.group(3) else 0
    if hours > 23 or minutes > 59 or seconds > 59:
        return None
    return hours * MINUTES_PER_HOUR + minutes


def format_time_of_day(minutes: int) -> str:
    return f"{minutes // MINUTES_PER_HOUR:02d}:{minutes % MINUTES_PER_HOUR:02d}"


def format_day_label(value: date) -> str:
    """Short local date label, e.g. '1. 6. 2024'."""
    return f"{value.day}. {value.month}. {value.year}"
