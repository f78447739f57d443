from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_HOURLY_RATE
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: user profile.

    Note: plain data object, no DB access code. The hourly rate is not
    historized; all totals are recomputed with the current value.
    """

    user_id: int
    username: str
    email: str
    password_hash: str
    role: Role
    hourly_rate: float = DEFAULT_HOURLY_RATE
    is_active: bool = True
    created_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
