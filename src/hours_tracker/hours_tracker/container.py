from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .backup.service import BackupService
from .core.constants import DEFAULT_HOURLY_RATE
from .database.connection import DBConfig, DatabaseConnection
from .entries.mysql_entry_repository import MySQLEntryRepository
from .entries.repository import EntryRepository
from .entries.service import EntryService
from .payroll.service import PayrollReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    entries_repo: EntryRepository

    auth_service: AuthService
    user_service: UserService
    entry_service: EntryService
    payroll_report_service: PayrollReportService
    backup_service: BackupService


def assemble_container(
    *,
    users_repo: UserRepository,
    entries_repo: EntryRepository,
    conn: Optional[DatabaseConnection] = None,
    default_hourly_rate: float = DEFAULT_HOURLY_RATE,
) -> Container:
    """Wire services on top of the given repositories (MySQL or in-memory)."""

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo, default_hourly_rate=default_hourly_rate)
    entry_service = EntryService(entries_repo)
    payroll_report_service = PayrollReportService(entries_repo, users_repo)
    backup_service = BackupService(entry_service, user_service)

    return Container(
        conn=conn,
        users_repo=users_repo,
        entries_repo=entries_repo,
        auth_service=auth_service,
        user_service=user_service,
        entry_service=entry_service,
        payroll_report_service=payroll_report_service,
        backup_service=backup_service,
    )


def build_container(*, db_config: dict, default_hourly_rate: float = DEFAULT_HOURLY_RATE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return assemble_container(
        users_repo=MySQLUserRepository(conn),
        entries_repo=MySQLEntryRepository(conn),
        conn=conn,
        default_hourly_rate=default_hourly_rate,
    )
