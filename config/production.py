import os

from .config import DB_CONFIG, SMTP_CONFIG, Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = dict(DB_CONFIG)
SMTP_CONFIG = dict(SMTP_CONFIG)

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

SCHEDULER_ENABLED = env_flag("SCHEDULER_ENABLED", "1")
SCAN_HOUR = Config.SCAN_HOUR
SCAN_MINUTE = Config.SCAN_MINUTE
SCAN_ON_STARTUP = env_flag("SCAN_ON_STARTUP", "1")
ALARM_DAYS_THRESHOLD = Config.ALARM_DAYS_THRESHOLD
