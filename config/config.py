import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.environ.get("DB_HOST", "localhost"),
        "port": int(os.environ.get("DB_PORT", "3306")),
        "user": os.environ.get("DB_USER", "root"),
        "password": os.environ.get("DB_PASSWORD", default_password),
        "database": os.environ.get("DB_NAME", os.environ.get("DB_DATABASE", "attendance_register")),
    }


def cors_origins_from_env(default: str = "*"):
    raw = os.environ.get("CORS_ORIGINS", default).strip()
    if raw == "*":
        return "*"
    return [o.strip() for o in raw.split(",") if o.strip()]
