"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ALARM_DAYS_THRESHOLD = 40
DEFAULT_REFERENCE_WEEKLY_HOURS = 40.0

SETTING_ALARM_DAYS_THRESHOLD = "alarm_days_threshold"
SETTING_REFERENCE_WEEKLY_HOURS = "basis_wochenstunden"

# 365.25 days / 7 days / 12 months
WEEKS_PER_MONTH = 4.348

FLAT_BONUS_100 = 100.0
FLAT_BONUS_150 = 150.0

NOTIFY_COOLDOWN_DAYS = 7
ACKNOWLEDGED_LOOKBACK_DAYS = 30

NOTIFICATION_LIST_LIMIT = 100
DEFAULT_SESSION_DAYS = 7
