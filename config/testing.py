from .config import db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CORS_ORIGINS = "*"

REQUIRE_TOKEN = True
TOKEN_TTL_MINUTES = 5
ENFORCE_EDIT_WINDOW = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
