import os

from .config import cors_origins_from_env, db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "5000"))

CORS_ORIGINS = cors_origins_from_env("http://localhost:3000")

REQUIRE_TOKEN = env_flag("REQUIRE_TOKEN", "1")
TOKEN_TTL_MINUTES = int(os.getenv("TOKEN_TTL_MINUTES", "60"))
ENFORCE_EDIT_WINDOW = env_flag("ENFORCE_EDIT_WINDOW", "0")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
