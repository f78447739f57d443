from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..shifts.model import Shift
from .codec import shifts_from_json, shifts_to_json
from .model import DailyEntry
from .repository import EntryRepository


def _to_entry(r: dict) -> DailyEntry:
    return DailyEntry(
        entry_id=int(r["entry_id"]),
        work_date=r["work_date"],
        shifts=shifts_from_json(r.get("shifts")),
        comment=r.get("comment") or None,
    )


class MySQLEntryRepository(EntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: int, *, ascending: bool = True) -> Sequence[DailyEntry]:
        order = "ASC" if ascending else "DESC"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT entry_id, work_date, shifts, comment
                FROM entries
                WHERE user_id=%s
                ORDER BY work_date {order}
                """,
                (user_id,),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[DailyEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT entry_id, work_date, shifts, comment
                FROM entries
                WHERE user_id=%s AND work_date=%s
                """,
                (user_id, work_date),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def upsert(
        self,
        *,
        user_id: int,
        work_date: date,
        shifts: Sequence[Shift],
        comment: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO entries(user_id, work_date, shifts, comment)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    entry_id=LAST_INSERT_ID(entry_id),
                    shifts=VALUES(shifts),
                    comment=VALUES(comment),
                    updated_at=CURRENT_TIMESTAMP
                """,
                (user_id, work_date, shifts_to_json(shifts), comment),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM entries WHERE entry_id=%s", (entry_id,))
            return cur.rowcount > 0
