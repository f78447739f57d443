from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hours_tracker.hours_tracker.database.bootstrap import ensure_admin_user
from src.hours_tracker.hours_tracker.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_admin_user(
        db_config,
        username=settings.ADMIN_USERNAME,
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        hourly_rate=float(settings.DEFAULT_HOURLY_RATE),
    )

    print(f"OK: Admin account {settings.ADMIN_USERNAME!r} ready -> {DBConfig.from_dict(db_config).describe()}")


if __name__ == "__main__":
    main()
