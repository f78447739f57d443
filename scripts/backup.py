"""Export one user's entries as a JSON backup file.

Usage: python scripts/backup.py <username> [output_dir]

The file has the same shape as the in-app download and can be imported back
through POST /api/backup.
"""

from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hours_tracker.hours_tracker.container import build_container


def main() -> None:
    if len(sys.argv) < 2:
        raise SystemExit("Usage: python scripts/backup.py <username> [output_dir]")

    username = sys.argv[1]
    out_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    user = container.users_repo.get_by_username(username)
    if not user:
        raise SystemExit(f"Unknown user: {username}")

    data = container.backup_service.export_backup(user.user_id)
    out_file = out_dir / container.backup_service.backup_filename(user.user_id)
    out_file.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(data['entries'])} entries)")


if __name__ == "__main__":
    main()
