"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EDIT_WINDOW_DAYS = 30
VIEW_WINDOW_DAYS = 180
PERCENTAGE_DECIMALS = 2
DEFAULT_TOKEN_TTL_MINUTES = 120
