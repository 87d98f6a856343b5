from config.config import MAX_UPLOAD_MB, db_config_from_env

DB_CONFIG = db_config_from_env(default_password="password")

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

LOG_LEVEL = "DEBUG"

__all__ = ["DB_CONFIG", "DEBUG", "TESTING", "AUTO_INIT_DB", "MAX_UPLOAD_MB", "LOG_LEVEL"]
