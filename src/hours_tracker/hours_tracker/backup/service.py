from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..common.validators import require_positive_number
from ..core.constants import BACKUP_VERSION
from ..core.exceptions import ValidationError
from ..entries.codec import entry_from_record, entry_to_record
from ..entries.service import EntryService
from ..users.service import UserService

logger = logging.getLogger(__name__)

_INVALID_FORMAT = "Invalid backup file format"


@dataclass(frozen=True)
class ImportResult:
    imported: int
    hourly_rate: Optional[float] = None


def _decode(payload: Union[dict, str, bytes, bytearray]) -> dict:
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise ValidationError(_INVALID_FORMAT)
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError:
            raise ValidationError(_INVALID_FORMAT)
    if not isinstance(payload, dict):
        raise ValidationError(_INVALID_FORMAT)
    return payload


class BackupService:
    """Use case: JSON export/import of a user's entries and hourly rate.

    Shape: {"version", "username", "hourlyRate", "entries": [...]}.
    """

    def __init__(self, entries: EntryService, users: UserService):
        self._entries = entries
        self._users = users

    def export_backup(self, user_id: int) -> dict:
        user = self._users.get_profile(user_id)
        return {
            "version": BACKUP_VERSION,
            "username": user.username,
            "hourlyRate": user.hourly_rate,
            "entries": [entry_to_record(e) for e in self._entries.list_entries(user_id)],
        }

    def backup_filename(self, user_id: int, *, today: Optional[date] = None) -> str:
        user = self._users.get_profile(user_id)
        today = today or date.today()
        return f"hours-backup-{user.username}-{today.strftime('%Y-%m-%d')}.json"

    def import_backup(self, user_id: int, payload: Union[dict, str, bytes, bytearray]) -> ImportResult:
        """Validate the whole payload, then overwrite entries date by date.

        Entries go to the importing user regardless of the username in the
        file. Stored shifts for an imported date are replaced, not merged.
        """

        data = _decode(payload)

        username = data.get("username")
        records = data.get("entries")
        if not isinstance(username, str) or not username.strip() or not isinstance(records, list):
            raise ValidationError(_INVALID_FORMAT)

        parsed = [entry_from_record(r) for r in records]

        rate = None
        raw_rate = data.get("hourlyRate")
        if raw_rate not in (None, "", 0):
            rate = require_positive_number(raw_rate, "Hourly rate")

        for entry in parsed:
            self._entries.save_entry(user_id, entry)
        if rate is not None:
            self._users.update_hourly_rate(user_id, rate)

        logger.info("Imported %d entries for user=%s (backup of %r)", len(parsed), user_id, username)
        return ImportResult(imported=len(parsed), hourly_rate=rate)
