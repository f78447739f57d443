from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from ..common.web import current_user_id, json_error, login_required, parse_date_arg, request_data
from ..container import Container
from ..core.exceptions import StorageError
from ..payroll.aggregation import daily_hours, shift_hours
from ..payroll.formatting import format_hours
from ..payroll.period import Period
from .model import DailyEntry


def register(app: Flask, container: Container) -> None:
    def _locale() -> str:
        return app.config.get("NUMBER_LOCALE", "sl-SI")

    def _entry_view(entry: DailyEntry) -> dict:
        hours = daily_hours(entry)
        return {
            "date": entry.work_date.strftime("%Y-%m-%d"),
            "comment": entry.comment,
            "hours": hours,
            "hours_display": format_hours(hours, _locale()),
            "shifts": [
                {
                    "id": s.shift_id,
                    "startTime": s.start_time,
                    "endTime": s.end_time,
                    "hours": shift_hours(s),
                    "hours_display": format_hours(shift_hours(s), _locale()),
                }
                for s in entry.shifts
            ],
        }

    def _day_response(work_date: date, entry: Optional[DailyEntry], status: int = 200):
        return jsonify({"success": True, "date": work_date.strftime("%Y-%m-%d"), "entry": _entry_view(entry) if entry else None}), status

    def _write_failed(user_id: int, work_date: date):
        # Report the stored state instead of what the client tried to write.
        try:
            entries = container.entry_service.reconcile(user_id, period=Period.of(work_date))
        except StorageError:
            return json_error("Could not save changes, please try again", 503)
        return json_error(
            "Could not save changes, please try again",
            503,
            entries=[_entry_view(e) for e in entries],
        )

    @app.route("/api/entries", methods=["GET"], endpoint="list_entries")
    @login_required
    def list_entries():
        month = request.args.get("month") or date.today().strftime("%Y-%m")
        period = Period.parse(month)
        entries = container.entry_service.list_entries(current_user_id(), period=period)
        return jsonify({"success": True, "month": period.key, "entries": [_entry_view(e) for e in entries]})

    @app.route("/api/entries/<date_s>", methods=["GET"], endpoint="get_entry")
    @login_required
    def get_entry(date_s: str):
        work_date = parse_date_arg(date_s)
        return _day_response(work_date, container.entry_service.get_entry(current_user_id(), work_date))

    @app.route("/api/entries/<date_s>/shifts", methods=["POST"], endpoint="add_shift")
    @login_required
    def add_shift(date_s: str):
        work_date = parse_date_arg(date_s)
        data = request_data()
        user_id = current_user_id()
        try:
            entry = container.entry_service.add_shift(
                user_id,
                work_date,
                data.get("startTime", ""),
                data.get("endTime", ""),
            )
        except StorageError:
            return _write_failed(user_id, work_date)
        return _day_response(work_date, entry, 201)

    @app.route("/api/entries/<date_s>/shifts/<shift_id>", methods=["DELETE"], endpoint="remove_shift")
    @login_required
    def remove_shift(date_s: str, shift_id: str):
        work_date = parse_date_arg(date_s)
        user_id = current_user_id()
        try:
            entry = container.entry_service.remove_shift(user_id, work_date, shift_id)
        except StorageError:
            return _write_failed(user_id, work_date)
        return _day_response(work_date, entry)

    @app.route("/api/entries/<date_s>/comment", methods=["PUT"], endpoint="set_comment")
    @login_required
    def set_comment(date_s: str):
        work_date = parse_date_arg(date_s)
        data = request_data()
        user_id = current_user_id()
        try:
            entry = container.entry_service.set_comment(user_id, work_date, data.get("comment"))
        except StorageError:
            return _write_failed(user_id, work_date)
        return _day_response(work_date, entry)
