from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: str, field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    local, _, domain = value.partition("@")
    if not local or not domain:
        raise ValidationError(f"{field_name} is not a valid address")
    return value.lower()


def require_positive_number(value: Any, field_name: str) -> float:
    """Accept int/float or a numeric string ('12.5' or '12,5') greater than 0."""

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is not a valid number")

    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a valid number")

    if number != number or number <= 0 or number == float("inf"):
        raise ValidationError(f"{field_name} must be greater than 0")
    return number
