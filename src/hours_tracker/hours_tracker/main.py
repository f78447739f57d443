from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .backup.controller import register as register_backup
from .common.web import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_HOURLY_RATE, DEFAULT_NUMBER_LOCALE, DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, ensure_admin_user, list_tables
from .database.connection import DBConfig
from .entries.controller import register as register_entries
from .payroll.controller import register as register_payroll
from .payroll.formatting import get_locale
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    A prebuilt container (e.g. with in-memory repositories) skips all
    database setup.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["NUMBER_LOCALE"] = getattr(settings, "NUMBER_LOCALE", DEFAULT_NUMBER_LOCALE)
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))
    get_locale(app.config["NUMBER_LOCALE"])

    default_rate = float(getattr(settings, "DEFAULT_HOURLY_RATE", DEFAULT_HOURLY_RATE))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_admin_user(
                db_config,
                username=getattr(settings, "ADMIN_USERNAME"),
                email=getattr(settings, "ADMIN_EMAIL"),
                password=getattr(settings, "ADMIN_PASSWORD"),
                hourly_rate=default_rate,
            )
            logger.info("admin account ready")

        container = build_container(db_config=db_config, default_hourly_rate=default_rate)

    app.extensions["hours_tracker"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_entries(app, container)
    register_payroll(app, container)
    register_backup(app, container)

    return app
