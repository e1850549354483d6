"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALLOWED_ROUND_MINUTES = (0, 5, 10, 15, 20, 30)
ALLOWED_WEEK_STARTS = (0, 1)  # 0=Sunday, 1=Monday

DEFAULT_WEEK_STARTS_ON = 1
DEFAULT_OVERTIME_THRESHOLD_HOURS = 40
# Fixed policy, not per-tenant.
OVERTIME_MULTIPLIER = 1.5

DEFAULT_AUDIT_LIMIT = 200
MAX_AUDIT_LIMIT = 1000

AUTO_SCHEDULE_OUT_TOKEN = "[AUTO_SCHEDULE_OUT]"
PENALTY_MINUTES_PATTERN = r"\[PENALTY_MINUTES:(\d+)\]"

DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_ROUNDING_MINUTES = 15
