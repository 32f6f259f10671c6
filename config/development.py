import os

from .config import cors_origins_from_env, db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
PORT = int(os.getenv("PORT", "5000"))

# React dev server runs on its own origin
CORS_ORIGINS = cors_origins_from_env("*")

# Bearer token on every endpoint except signup/signin/health/window
REQUIRE_TOKEN = env_flag("REQUIRE_TOKEN", "1")
TOKEN_TTL_MINUTES = int(os.getenv("TOKEN_TTL_MINUTES", "120"))

# Reject marks older than 30 days (or in the future) on the server too
ENFORCE_EDIT_WINDOW = env_flag("ENFORCE_EDIT_WINDOW", "0")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed demo data on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
