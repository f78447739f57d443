"""Boundary conversion between loose JSON records and the entry model.

Shift lists are stored and exported with the camelCase keys
``id``/``startTime``/``endTime``; entries use ``date``/``shifts``/``comment``.
"""

from __future__ import annotations

import json
import uuid
from typing import Any, Iterable, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..shifts.model import Shift
from .model import DailyEntry


def new_shift_id() -> str:
    return uuid.uuid4().hex


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def shift_from_record(record: Any) -> Shift:
    if not isinstance(record, dict):
        raise ValidationError("Shift must be an object")

    shift_id = record.get("id")
    if shift_id is None or shift_id == "":
        shift_id = new_shift_id()

    # Times are kept verbatim; unparseable ones simply count as 0 hours.
    return Shift(
        shift_id=str(shift_id),
        start_time=_optional_str(record.get("startTime")),
        end_time=_optional_str(record.get("endTime")),
    )


def shift_to_record(shift: Shift) -> dict:
    return {"id": shift.shift_id, "startTime": shift.start_time, "endTime": shift.end_time}


def shifts_from_records(records: Any) -> tuple[Shift, ...]:
    if records is None:
        return ()
    if not isinstance(records, list):
        raise ValidationError("Shifts must be a list")

    # Shift ids are unique within a day; repeated ones get a fresh id.
    shifts: list[Shift] = []
    seen: set[str] = set()
    for r in records:
        shift = shift_from_record(r)
        if shift.shift_id in seen:
            shift = Shift(shift_id=new_shift_id(), start_time=shift.start_time, end_time=shift.end_time)
        seen.add(shift.shift_id)
        shifts.append(shift)
    return tuple(shifts)


def shifts_to_json(shifts: Iterable[Shift]) -> str:
    return json.dumps([shift_to_record(s) for s in shifts])


def shifts_from_json(value: Any) -> tuple[Shift, ...]:
    """Decode a stored JSON column (str/bytes, or already-decoded list)."""

    if value is None or value == "":
        return ()
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        value = json.loads(value)
    return shifts_from_records(value)


def entry_from_record(record: Any) -> DailyEntry:
    if not isinstance(record, dict):
        raise ValidationError("Entry must be an object")

    date_s = record.get("date")
    if not isinstance(date_s, str) or not date_s:
        raise ValidationError("Entry is missing its date")
    try:
        work_date = parse_iso_date(date_s)
    except ValueError:
        raise ValidationError(f"Invalid entry date: {date_s!r}")

    comment = record.get("comment")
    if comment is not None and not isinstance(comment, str):
        raise ValidationError(f"Invalid comment for {date_s}")

    return DailyEntry(
        work_date=work_date,
        shifts=shifts_from_records(record.get("shifts")),
        comment=comment or None,
    )


def entry_to_record(entry: DailyEntry) -> dict:
    out: dict = {
        "date": entry.work_date.strftime("%Y-%m-%d"),
        "shifts": [shift_to_record(s) for s in entry.shifts],
    }
    if entry.comment:
        out["comment"] = entry.comment
    return out
