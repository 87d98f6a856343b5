from config.config import LOG_LEVEL, MAX_UPLOAD_MB, db_config_from_env, env_flag

DB_CONFIG = db_config_from_env(default_password="password")

DEBUG = True

# If enabled, app will apply database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")

__all__ = ["DB_CONFIG", "DEBUG", "AUTO_INIT_DB", "MAX_UPLOAD_MB", "LOG_LEVEL"]
