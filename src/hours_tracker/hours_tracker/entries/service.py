from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_time_of_day
from ..core.exceptions import ValidationError
from ..payroll.period import Period
from ..shifts.model import Shift
from .codec import new_shift_id
from .model import DailyEntry
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class EntryService:
    """Use case: record shifts and comments per day.

    save_entry() is the only place that writes; it deletes entries that end
    up with no shifts and no comment instead of storing them.
    """

    def __init__(self, entries: EntryRepository):
        self._entries = entries

    def list_entries(self, user_id: int, *, period: Optional[Period] = None) -> list[DailyEntry]:
        rows = list(self._entries.list_for_user(user_id, ascending=True))
        if period is not None:
            rows = [e for e in rows if period.contains(e.work_date)]
        rows.sort(key=lambda e: e.work_date)
        return rows

    def get_entry(self, user_id: int, work_date: date) -> Optional[DailyEntry]:
        return self._entries.get_for_user_and_date(user_id, work_date)

    def _current(self, user_id: int, work_date: date) -> DailyEntry:
        return self._entries.get_for_user_and_date(user_id, work_date) or DailyEntry(work_date=work_date)

    def save_entry(self, user_id: int, entry: DailyEntry) -> Optional[DailyEntry]:
        if entry.is_empty:
            existing = self._entries.get_for_user_and_date(user_id, entry.work_date)
            if existing and existing.entry_id is not None:
                self._entries.delete_by_id(existing.entry_id)
                logger.info("Deleted empty entry user=%s date=%s", user_id, entry.work_date)
            return None

        comment = (entry.comment or "").strip() or None
        self._entries.upsert(
            user_id=user_id,
            work_date=entry.work_date,
            shifts=list(entry.shifts),
            comment=comment,
        )
        logger.info("Saved entry user=%s date=%s shifts=%d", user_id, entry.work_date, len(entry.shifts))
        return self._entries.get_for_user_and_date(user_id, entry.work_date)

    def add_shift(self, user_id: int, work_date: date, start_time: str, end_time: str) -> Optional[DailyEntry]:
        # parse_time_of_day() returns None for non-string values too.
        if parse_time_of_day(start_time) is None:
            raise ValidationError("Start time must be in HH:MM format")
        if parse_time_of_day(end_time) is None:
            raise ValidationError("End time must be in HH:MM format")

        start_time, end_time = start_time.strip(), end_time.strip()
        entry = self._current(user_id, work_date)
        shift = Shift(shift_id=new_shift_id(), start_time=start_time, end_time=end_time)
        return self.save_entry(user_id, replace(entry, shifts=entry.shifts + (shift,)))

    def remove_shift(self, user_id: int, work_date: date, shift_id: str) -> Optional[DailyEntry]:
        entry = self._current(user_id, work_date)
        if entry.find_shift(shift_id) is None:
            raise ValidationError("Shift does not exist")

        remaining = tuple(s for s in entry.shifts if s.shift_id != shift_id)
        return self.save_entry(user_id, replace(entry, shifts=remaining))

    def set_comment(self, user_id: int, work_date: date, comment: Optional[str]) -> Optional[DailyEntry]:
        if comment is not None and not isinstance(comment, str):
            raise ValidationError("Comment must be text")
        entry = self._current(user_id, work_date)
        return self.save_entry(user_id, replace(entry, comment=(comment or "").strip() or None))

    def reconcile(self, user_id: int, *, period: Optional[Period] = None) -> list[DailyEntry]:
        """Re-read stored state after a failed write."""
        logger.warning("Reconciling entries for user=%s after a failed write", user_id)
        return self.list_entries(user_id, period=period)
