from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.exceptions import ValidationError
from ..entries.model import DailyEntry
from ..entries.repository import EntryRepository
from ..users.repository import UserRepository
from .aggregation import entries_in_period
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator
from .period import Period

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayRow:
    work_date: date
    hours: float
    amount: float
    comment: Optional[str] = None
    has_entry: bool = False


@dataclass(frozen=True)
class MonthlyReport:
    period: Period
    hourly_rate: float
    rows: list[DayRow]
    total_hours: float
    total_amount: float

    @property
    def worked_rows(self) -> list[DayRow]:
        return [r for r in self.rows if r.hours]


@dataclass(frozen=True)
class MonthStat:
    period: Period
    hours: float
    earnings: float


@dataclass(frozen=True)
class StatisticsTotals:
    hours: float
    earnings: float


def total_statistics(stats: Iterable[MonthStat]) -> StatisticsTotals:
    """Sum the already rounded month figures across all months."""

    hours = earnings = 0.0
    for s in stats:
        hours += s.hours
        earnings += s.earnings
    return StatisticsTotals(hours=round(hours, 2), earnings=round(earnings, 2))


class PayrollReportService:
    def __init__(
        self,
        entries: EntryRepository,
        users: UserRepository,
        *,
        calculator: Optional[HoursCalculator] = None,
    ):
        self._entries = entries
        self._users = users
        self._calculator = calculator or StandardHoursCalculator()

    def _rate_for(self, user_id: int, hourly_rate: Optional[float]) -> float:
        if hourly_rate is not None:
            return float(hourly_rate)
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("User does not exist")
        return float(user.hourly_rate)

    def summarize_month(self, entries: Iterable[DailyEntry], period: Period, hourly_rate: float) -> MonthlyReport:
        """Build the per-day report for a month from already loaded entries.

        Every calendar day gets a row. Days without an entry have
        has_entry=False; days with an entry of 0 hours keep has_entry=True.
        """

        hours_by_day: dict[date, float] = {}
        comment_by_day: dict[date, Optional[str]] = {}
        for e in entries_in_period(entries, period):
            hours_by_day[e.work_date] = hours_by_day.get(e.work_date, 0.0) + self._calculator.daily_hours(e)
            if e.comment and not comment_by_day.get(e.work_date):
                comment_by_day[e.work_date] = e.comment

        rows: list[DayRow] = []
        for day in period.days():
            hours = hours_by_day.get(day, 0.0)
            rows.append(
                DayRow(
                    work_date=day,
                    hours=hours,
                    amount=hours * hourly_rate,
                    comment=comment_by_day.get(day),
                    has_entry=day in hours_by_day,
                )
            )

        total_hours = sum((r.hours for r in rows), 0.0)
        return MonthlyReport(
            period=period,
            hourly_rate=hourly_rate,
            rows=rows,
            total_hours=total_hours,
            total_amount=total_hours * hourly_rate,
        )

    def build_monthly_report(
        self,
        user_id: int,
        period: Period,
        *,
        hourly_rate: Optional[float] = None,
    ) -> MonthlyReport:
        rate = self._rate_for(user_id, hourly_rate)
        entries = self._entries.list_for_user(user_id)
        report = self.summarize_month(entries, period, rate)
        logger.debug("Monthly report user=%s period=%s hours=%.2f", user_id, period, report.total_hours)
        return report

    def build_statistics(self, user_id: int, *, hourly_rate: Optional[float] = None) -> list[MonthStat]:
        """Hours and earnings per month over all of the user's entries."""

        rate = self._rate_for(user_id, hourly_rate)
        hours_by_period: dict[Period, float] = {}
        for e in self._entries.list_for_user(user_id):
            p = Period.of(e.work_date)
            hours_by_period[p] = hours_by_period.get(p, 0.0) + self._calculator.daily_hours(e)

        return [
            MonthStat(period=p, hours=round(hours, 2), earnings=round(hours * rate, 2))
            for p, hours in sorted(hours_by_period.items())
        ]
