from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

load_dotenv(override=False)

from config import get_settings_module

from src.lohnmonitor.lohnmonitor.core.enums import Role
from src.lohnmonitor.lohnmonitor.database.bootstrap import apply_seed_sql, ensure_user


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_user(db_config, username="admin", password=os.getenv("ADMIN_PASSWORD", "password"), role=Role.ADMIN.value)
    ensure_user(db_config, username="viewer", password=os.getenv("VIEWER_PASSWORD", "viewer123"), role=Role.VIEWER.value)

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
