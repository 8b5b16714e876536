from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.parlor_staff.parlor_staff.database.bootstrap import ensure_user
from src.parlor_staff.parlor_staff.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("seed_db")


def main() -> None:
    parser = argparse.ArgumentParser(description="Create or refresh a login account")
    parser.add_argument("--login-id", default="admin")
    parser.add_argument("--password", required=True)
    parser.add_argument("--name", default="Administrator")
    parser.add_argument("--role", choices=["ADMIN", "MEMBER"], default="ADMIN")
    parser.add_argument("--store", default="Main store")
    args = parser.parse_args()

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(settings.DB_CONFIG))

    user_id = ensure_user(
        conn,
        name=args.name,
        login_id=args.login_id,
        password=args.password,
        role=args.role,
        store_name=args.store,
    )
    logger.info("OK: user id=%s (%s)", user_id, args.login_id)


if __name__ == "__main__":
    main()
