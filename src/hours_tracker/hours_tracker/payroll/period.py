from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..core.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Period:
    """A calendar month used as the aggregation window."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= int(self.month) <= 12 or not 1 <= int(self.year) <= 9999:
            raise ValidationError(f"Invalid month: {self.year}-{self.month}")

    @classmethod
    def parse(cls, value: str) -> "Period":
        """Parse 'YYYY-MM'."""
        try:
            d = datetime.strptime((value or "").strip(), "%Y-%m")
        except ValueError:
            raise ValidationError(f"Invalid month: {value!r} (expected YYYY-MM)")
        return cls(d.year, d.month)

    @classmethod
    def of(cls, value: date) -> "Period":
        return cls(value.year, value.month)

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def days(self) -> list[date]:
        first = self.first_day
        return [first + timedelta(days=i) for i in range(self.last_day.day)]

    def contains(self, value: date) -> bool:
        return value.year == self.year and value.month == self.month

    def __str__(self) -> str:
        return self.key
