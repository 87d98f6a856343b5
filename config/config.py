"""Settings shared by every environment module (read from the process env / .env)."""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "CACEI_ADMISION_DB"),
    }


MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "5"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
