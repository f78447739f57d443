from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, username, email, password_hash, role, hourly_rate, is_active, created_at"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        hourly_rate=to_float(row.get("hourly_rate")),
        is_active=bool(row.get("is_active", True)),
        created_at=row.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE {column}=%s", (value,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_one("user_id", user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_one("username", username)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_one("email", email)

    def create_user(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        role: Role,
        hourly_rate: float,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, email, password_hash, role, hourly_rate, is_active)
                VALUES(%s,%s,%s,%s,%s,1)
                """,
                (username, email, password_hash, role.value, hourly_rate),
            )
            return int(cur.lastrowid)

    def update_hourly_rate(self, user_id: int, hourly_rate: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET hourly_rate=%s WHERE user_id=%s", (hourly_rate, user_id))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY created_at DESC, user_id DESC")
            return [_to_user(r) for r in fetchall(cur)]
