from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.hours_tracker.hours_tracker.container import assemble_container
from src.hours_tracker.hours_tracker.core.enums import Role
from src.hours_tracker.hours_tracker.core.exceptions import StorageError
from src.hours_tracker.hours_tracker.entries.model import DailyEntry
from src.hours_tracker.hours_tracker.users.model import User


class InMemoryUsers:
    def __init__(self, users: list[User] = ()):
        self._by_id: dict[int, User] = {u.user_id: u for u in users}
        self._next_id = max(self._by_id, default=0) + 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.username == username), None)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def create_user(self, *, username, email, password_hash, role, hourly_rate) -> int:
        user_id = self._next_id
        self._next_id += 1
        self._by_id[user_id] = User(
            user_id=user_id,
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
            hourly_rate=hourly_rate,
            created_at=datetime(2024, 1, 1, 12, user_id % 60),
        )
        return user_id

    def update_hourly_rate(self, user_id: int, hourly_rate: float) -> bool:
        user = self._by_id.get(int(user_id))
        if not user:
            return False
        self._by_id[user.user_id] = User(
            user_id=user.user_id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role,
            hourly_rate=hourly_rate,
            is_active=user.is_active,
            created_at=user.created_at,
        )
        return True

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda u: (u.created_at or datetime.min, u.user_id), reverse=True)


class InMemoryEntries:
    def __init__(self):
        self._rows: dict[tuple[int, date], DailyEntry] = {}
        self._next_id = 1
        self.fail_writes = False
        self.writes: list[tuple] = []

    def list_for_user(self, user_id: int, *, ascending: bool = True):
        rows = [e for (uid, _), e in self._rows.items() if uid == user_id]
        rows.sort(key=lambda e: e.work_date, reverse=not ascending)
        return rows

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[DailyEntry]:
        return self._rows.get((user_id, work_date))

    def upsert(self, *, user_id, work_date, shifts, comment=None) -> int:
        if self.fail_writes:
            raise StorageError("Database operation failed")
        existing = self._rows.get((user_id, work_date))
        entry_id = existing.entry_id if existing else self._next_id
        if not existing:
            self._next_id += 1
        self._rows[(user_id, work_date)] = DailyEntry(
            entry_id=entry_id,
            work_date=work_date,
            shifts=tuple(shifts),
            comment=comment,
        )
        self.writes.append(("upsert", user_id, work_date))
        return entry_id

    def delete_by_id(self, entry_id: int) -> bool:
        if self.fail_writes:
            raise StorageError("Database operation failed")
        for key, e in list(self._rows.items()):
            if e.entry_id == entry_id:
                del self._rows[key]
                self.writes.append(("delete", key[0], key[1]))
                return True
        return False


@pytest.fixture(scope="session")
def password_hashes():
    return {
        "admin123": generate_password_hash("admin123"),
        "mojca123": generate_password_hash("mojca123"),
    }


@pytest.fixture
def users_repo(password_hashes):
    return InMemoryUsers(
        [
            User(
                user_id=1,
                username="admin",
                email="admin@example.com",
                password_hash=password_hashes["admin123"],
                role=Role.ADMIN,
                hourly_rate=12.5,
                created_at=datetime(2023, 12, 1, 9, 0),
            ),
            User(
                user_id=2,
                username="mojca",
                email="mojca@example.com",
                password_hash=password_hashes["mojca123"],
                role=Role.USER,
                hourly_rate=9.0,
                created_at=datetime(2023, 12, 2, 9, 0),
            ),
        ]
    )


@pytest.fixture
def entries_repo():
    return InMemoryEntries()


@pytest.fixture
def container(users_repo, entries_repo):
    return assemble_container(users_repo=users_repo, entries_repo=entries_repo, default_hourly_rate=9.0)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.hours_tracker.hours_tracker.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(username: str = "mojca", password: str = "mojca123"):
        resp = client.post("/api/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return resp

    return _login
