from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employees.controller import register as register_employees
from .scan.controller import register as register_scan
from .scan.scheduler import init_scheduled_scan
from .settings.controller import register as register_settings
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        logger.info("demo seed ready")

    container = build_container(
        db_config=db_config,
        smtp_config=getattr(settings, "SMTP_CONFIG", None),
        env_threshold_days=getattr(settings, "ALARM_DAYS_THRESHOLD", None),
    )
    app.extensions["lohnmonitor"] = container

    register_users(app, container)
    register_dashboard(app, container)
    register_employees(app, container)
    register_scan(app, container)
    register_settings(app, container)

    if bool(getattr(settings, "SCHEDULER_ENABLED", False)):
        init_scheduled_scan(
            container.scan_orchestrator,
            hour=int(getattr(settings, "SCAN_HOUR", 8)),
            minute=int(getattr(settings, "SCAN_MINUTE", 0)),
            run_on_startup=bool(getattr(settings, "SCAN_ON_STARTUP", False)),
        )

    return app
