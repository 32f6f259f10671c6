from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import json_error
from .common.logging_setup import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_TOKEN_TTL_MINUTES
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_account, list_tables
from .database.connection import DBConfig
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"

SETTING_NAMES = (
    "SECRET_KEY",
    "DB_CONFIG",
    "DEBUG",
    "TESTING",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
    "REQUIRE_TOKEN",
    "TOKEN_TTL_MINUTES",
    "ENFORCE_EDIT_WINDOW",
    "CORS_ORIGINS",
    "LOG_LEVEL",
)


def _load_settings(settings_module: str) -> dict:
    settings = importlib.import_module(settings_module)
    return {name: getattr(settings, name) for name in SETTING_NAMES if hasattr(settings, name)}


def create_app(
    *,
    settings_module: Optional[str] = None,
    overrides: Optional[dict] = None,
    container: Optional[Container] = None,
) -> Flask:
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()

    app = Flask(__name__)
    app.config.update(_load_settings(settings_module))
    app.config.update(overrides or {})
    app.secret_key = app.config["SECRET_KEY"]
    app.json.sort_keys = False

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    db_config = app.config.get("DB_CONFIG") or {}
    logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

    CORS(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    if container is None:
        if app.config.get("AUTO_INIT_DB"):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if app.config.get("AUTO_SEED_DB"):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_account(db_config)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            secret_key=app.config["SECRET_KEY"],
            token_ttl_minutes=int(app.config.get("TOKEN_TTL_MINUTES", DEFAULT_TOKEN_TTL_MINUTES)),
            enforce_edit_window=bool(app.config.get("ENFORCE_EDIT_WINDOW", False)),
        )

    app.extensions["container"] = container

    register_users(app, container)
    register_students(app, container)
    register_attendance(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.errorhandler(404)
    def not_found(_e):
        return json_error("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return json_error("Method not allowed", 405)

    return app
