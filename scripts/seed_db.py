from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_register.attendance_register.common.logging_setup import configure_logging
from src.attendance_register.attendance_register.database.bootstrap import (
    DEMO_ACCOUNT,
    apply_seed_sql,
    ensure_demo_account,
)
from src.attendance_register.attendance_register.database.connection import DBConfig

logger = logging.getLogger("seed_db")


def main() -> None:
    load_dotenv(override=False)
    configure_logging("INFO")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    account_id = ensure_demo_account(db_config)

    logger.info(
        "Seeded database -> %s (demo account %s, id=%d)",
        DBConfig.from_dict(db_config).describe(),
        DEMO_ACCOUNT["email"],
        account_id,
    )


if __name__ == "__main__":
    main()
