from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_ADVANCE_STEP, DEFAULT_NIGHT_WINDOW_END, DEFAULT_NIGHT_WINDOW_START, DEFAULT_SHIFT_TYPE_WINDOWS
from .database.bootstrap import apply_schema, list_tables
from .games.controller import register as register_games
from .payroll.controller import register as register_payroll
from .settings.controller import register as register_settings
from .shift_board.controller import register as register_shift_board
from .shifts.controller import register as register_shifts
from .special_wages.controller import register as register_special_wages
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        container = build_container(
            db_config=db_config,
            night_window=(
                getattr(settings, "NIGHT_WINDOW_START", DEFAULT_NIGHT_WINDOW_START),
                getattr(settings, "NIGHT_WINDOW_END", DEFAULT_NIGHT_WINDOW_END),
            ),
            shift_type_windows=getattr(settings, "SHIFT_TYPE_WINDOWS", DEFAULT_SHIFT_TYPE_WINDOWS),
            advance_step=int(getattr(settings, "ADVANCE_STEP", DEFAULT_ADVANCE_STEP)),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(container.conn, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    register_error_handlers(app)
    register_users(app, container)
    register_shifts(app, container)
    register_settings(app, container)
    register_special_wages(app, container)
    register_games(app, container)
    register_payroll(app, container)
    register_shift_board(app, container)

    return app
