from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_min_length, require_non_empty, require_positive_number
from ..core.constants import DEFAULT_HOURLY_RATE, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str
    role: Role
    hourly_rate: float


def profile_view(user: User) -> dict:
    return {
        "user_id": user.user_id,
        "username": user.username,
        "email": user.email,
        "role": user.role.value,
        "is_admin": user.is_admin,
        "hourly_rate": user.hourly_rate,
        "is_active": user.is_active,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, login: str, password: str) -> SessionUser:
        if not isinstance(login, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid username or password")
        login = login.strip()
        user = self._users.get_by_email(login.lower()) if "@" in login else self._users.get_by_username(login)
        if not user or not user.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Failed login for %r", login)
            raise AuthenticationError("Invalid username or password")

        return SessionUser(
            user_id=user.user_id,
            username=user.username,
            role=user.role,
            hourly_rate=user.hourly_rate,
        )


class UserService:
    """Use case: manage profiles (admin) and the personal hourly rate."""

    def __init__(self, users: UserRepository, *, default_hourly_rate: float = DEFAULT_HOURLY_RATE):
        self._users = users
        self._default_rate = float(default_hourly_rate)

    def get_profile(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("User does not exist")
        return user

    def list_profiles(self, *, current_role: Role) -> list[User]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")
        return list(self._users.list_all())

    def create_account(
        self,
        *,
        current_role: Role,
        username: str,
        email: str,
        password: str,
        hourly_rate: Optional[Any] = None,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        username = require_non_empty(username, "Username")
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        rate = self._default_rate if hourly_rate in (None, "") else require_positive_number(hourly_rate, "Hourly rate")

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")
        if self._users.get_by_email(email):
            raise ValidationError("Email already exists")

        user_id = self._users.create_user(
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.USER,
            hourly_rate=rate,
        )
        logger.info("Created account %r (id=%s)", username, user_id)
        return user_id

    def update_hourly_rate(self, user_id: int, rate: Any) -> float:
        value = require_positive_number(rate, "Hourly rate")
        self.get_profile(user_id)
        self._users.update_hourly_rate(user_id, value)
        logger.info("Hourly rate for user=%s set to %s", user_id, value)
        return value
