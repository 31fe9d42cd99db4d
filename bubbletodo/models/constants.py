"""Constants for BubbleTodo.

This module centralizes all magic numbers and default values used by the engine.
"""


# Task defaults
DEFAULT_PRIORITY = 3
MIN_PRIORITY = 1
MAX_PRIORITY = 5
DEFAULT_BASE_WEIGHT = 1.0
DEFAULT_EFFORT = 1.0

# Effective weight growth
OVERDUE_WEIGHT_PER_HOUR = 0.1
STALE_WEIGHT_PER_HOUR = 0.05
STALE_AFTER_HOURS = 24.0
DEADLINE_RAMP_NEAR_HOURS = 24.0
DEADLINE_RAMP_NEAR_FACTOR = 0.5
DEADLINE_RAMP_FAR_HOURS = 72.0
DEADLINE_RAMP_FAR_FACTOR = 0.3

# Sort score (priority dominates at the 1000s scale)
PRIORITY_SCORE_SCALE = 1000
DUE_TODAY_AHEAD_BONUS = 500
DUE_TODAY_AHEAD_DECAY_PER_HOUR = 20
DUE_TODAY_PAST_BONUS = 500
DUE_TODAY_PAST_PER_HOUR = 100
OVERDUE_BONUS = 1000
OVERDUE_PER_HOUR = 50
DEADLINE_NEAR_BONUS = 200
DEADLINE_NEAR_PER_HOUR = 8
DEADLINE_FAR_PER_HOUR = 2.8
STALE_SCORE_PER_HOUR = 2
STALE_SCORE_CAP = 100

# Recurrence spacing (approximate slots)
DAYS_PER_WEEK = 7
APPROX_DAYS_PER_MONTH = 30
WEEKDAY_SCAN_DAYS = 8
