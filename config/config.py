import os


def env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default: int | None = None) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "lohnmonitor-dev-secret"

    # DB
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "lohnmonitor")

    # Mail
    SMTP_ENABLED = env_flag("SMTP_ENABLED")
    SMTP_HOST = os.environ.get("SMTP_HOST")
    SMTP_PORT = int(os.environ.get("SMTP_PORT", "587"))
    SMTP_SECURE = env_flag("SMTP_SECURE")
    SMTP_USER = os.environ.get("SMTP_USER")
    SMTP_PASSWORD = os.environ.get("SMTP_PASSWORD")
    SMTP_FROM = os.environ.get("SMTP_FROM", "Lohnmonitor <noreply@company.de>")
    SMTP_TO = os.environ.get("SMTP_TO")

    # Scheduler
    SCAN_HOUR = int(os.environ.get("SCAN_HOUR", "8"))
    SCAN_MINUTE = int(os.environ.get("SCAN_MINUTE", "0"))

    # Used when the settings table has no alarm_days_threshold row
    ALARM_DAYS_THRESHOLD = env_int("ALARM_DAYS_THRESHOLD")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}

SMTP_CONFIG = {
    "enabled": Config.SMTP_ENABLED,
    "host": Config.SMTP_HOST,
    "port": Config.SMTP_PORT,
    "use_ssl": Config.SMTP_SECURE,
    "use_tls": not Config.SMTP_SECURE,
    "username": Config.SMTP_USER,
    "password": Config.SMTP_PASSWORD,
    "sender": Config.SMTP_FROM,
    "recipient": Config.SMTP_TO,
}
