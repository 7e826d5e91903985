from .config import DB_CONFIG, Config

SECRET_KEY = "test-secret"

DB_CONFIG = dict(DB_CONFIG)
SMTP_CONFIG = {"enabled": False}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

SCHEDULER_ENABLED = False
SCAN_ON_STARTUP = False
ALARM_DAYS_THRESHOLD = Config.ALARM_DAYS_THRESHOLD
