from __future__ import annotations

import csv
import io

from ..common.datetime_utils import format_day_label
from ..core.constants import CSV_DELIMITER, CSV_HEADER, CSV_TOTAL_LABEL
from .formatting import format_number
from .service import MonthlyReport


def _csv_hours(value: float) -> str:
    return format_number(value, min_fraction=1, max_fraction=2, decimal_sep=",")


def _csv_amount(value: float) -> str:
    return format_number(value, min_fraction=2, max_fraction=2, decimal_sep=",")


def monthly_report_csv(report: MonthlyReport) -> str:
    """Semicolon-separated monthly summary with decimal commas.

    One row per day with hours worked, then a totals row.
    """

    out = io.StringIO()
    writer = csv.writer(out, delimiter=CSV_DELIMITER, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in report.worked_rows:
        writer.writerow(
            [
                format_day_label(row.work_date),
                _csv_hours(row.hours),
                row.comment or "",
                _csv_amount(row.amount),
            ]
        )
    writer.writerow([CSV_TOTAL_LABEL, _csv_hours(report.total_hours), "", _csv_amount(report.total_amount)])
    return out.getvalue()


def monthly_report_filename(report: MonthlyReport) -> str:
    return f"summary_{report.period.key}.csv"
