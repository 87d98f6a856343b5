from config.config import MAX_UPLOAD_MB, db_config_from_env, env_flag
import os

DB_CONFIG = db_config_from_env()

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

__all__ = ["DB_CONFIG", "DEBUG", "AUTO_INIT_DB", "MAX_UPLOAD_MB", "LOG_LEVEL"]
