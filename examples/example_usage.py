"""Example: using the hours engine and services without Flask.

Controllers are a thin layer; the computation lives in payroll.
"""

from datetime import date

from src.hours_tracker.hours_tracker.entries.model import DailyEntry
from src.hours_tracker.hours_tracker.payroll.aggregation import period_earnings, period_hours
from src.hours_tracker.hours_tracker.payroll.formatting import format_currency, format_hours
from src.hours_tracker.hours_tracker.payroll.period import Period
from src.hours_tracker.hours_tracker.shifts.model import Shift


def main():
    entries = [
        DailyEntry(work_date=date(2024, 6, 1), shifts=(Shift("a", "08:00", "16:00"),)),
        DailyEntry(work_date=date(2024, 6, 2), shifts=(Shift("b", "22:00", "06:00"),), comment="night"),
    ]
    june = Period.parse("2024-06")
    hours = period_hours(entries, june)
    print(f"{june}: {format_hours(hours)} h, {format_currency(period_earnings(entries, june, 10.0))}")


if __name__ == "__main__":
    main()
