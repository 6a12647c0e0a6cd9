"""Shared emission thresholds used by the advisory engine and the UI status helpers."""

# Target emissions for a trip (g/km). Tips, status colouring and the
# goal-progress ring all compare against this one value.
GOAL_G_PER_KM = 150

# Emissions at or above this value score 0.
SCORE_CEILING_G_PER_KM = 300

# History timestamps, e.g. "2024-03-07 18:05"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
