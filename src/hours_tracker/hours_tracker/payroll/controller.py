from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.web import current_user_id, login_required
from ..container import Container
from .export import monthly_report_csv, monthly_report_filename
from .formatting import format_currency, format_hours
from .period import Period
from .service import MonthlyReport, total_statistics


def register(app: Flask, container: Container) -> None:
    def _locale() -> str:
        return app.config.get("NUMBER_LOCALE", "sl-SI")

    def _selected_period() -> Period:
        return Period.parse(request.args.get("month") or date.today().strftime("%Y-%m"))

    def _report_view(report: MonthlyReport) -> dict:
        loc = _locale()
        return {
            "month": report.period.key,
            "hourly_rate": report.hourly_rate,
            "hourly_rate_display": format_currency(report.hourly_rate, loc),
            "total_hours": report.total_hours,
            "total_hours_display": format_hours(report.total_hours, loc),
            "total_amount": report.total_amount,
            "total_amount_display": format_currency(report.total_amount, loc),
            "days": [
                {
                    "date": r.work_date.strftime("%Y-%m-%d"),
                    "hours": r.hours,
                    "hours_display": format_hours(r.hours, loc),
                    "amount": r.amount,
                    "amount_display": format_currency(r.amount, loc),
                    "comment": r.comment,
                    "has_entry": r.has_entry,
                }
                for r in report.rows
            ],
        }

    @app.route("/api/summary", methods=["GET"], endpoint="monthly_summary")
    @login_required
    def monthly_summary():
        report = container.payroll_report_service.build_monthly_report(current_user_id(), _selected_period())
        return jsonify({"success": True, "summary": _report_view(report)})

    @app.route("/api/summary.csv", methods=["GET"], endpoint="monthly_summary_csv")
    @login_required
    def monthly_summary_csv():
        report = container.payroll_report_service.build_monthly_report(current_user_id(), _selected_period())
        return app.response_class(
            monthly_report_csv(report).encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={monthly_report_filename(report)}"},
        )

    @app.route("/api/statistics", methods=["GET"], endpoint="statistics")
    @login_required
    def statistics():
        stats = container.payroll_report_service.build_statistics(current_user_id())
        totals = total_statistics(stats)
        loc = _locale()
        return jsonify(
            {
                "success": True,
                "months": [
                    {
                        "month": s.period.key,
                        "hours": s.hours,
                        "hours_display": format_hours(s.hours, loc),
                        "earnings": s.earnings,
                        "earnings_display": format_currency(s.earnings, loc),
                    }
                    for s in stats
                ],
                "totals": {
                    "hours": totals.hours,
                    "hours_display": format_hours(totals.hours, loc),
                    "earnings": totals.earnings,
                    "earnings_display": format_currency(totals.earnings, loc),
                },
            }
        )
