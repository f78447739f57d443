from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for user profiles.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        role: Role,
        hourly_rate: float,
    ) -> int:
        raise NotImplementedError

    def update_hourly_rate(self, user_id: int, hourly_rate: float) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        """All profiles, newest first."""
        raise NotImplementedError
