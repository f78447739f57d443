from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..shifts.model import Shift
from .model import DailyEntry


class EntryRepository(Protocol):
    """Repository interface for daily entries.

    Note: services depend on this interface, not on a concrete store.
    Entries are unique per (user_id, work_date).
    """

    def list_for_user(self, user_id: int, *, ascending: bool = True) -> Sequence[DailyEntry]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[DailyEntry]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        user_id: int,
        work_date: date,
        shifts: Sequence[Shift],
        comment: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, entry_id: int) -> bool:
        raise NotImplementedError
