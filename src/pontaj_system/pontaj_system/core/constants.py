"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

RESIGNATION_PATTERN = ("D", "E", "M", "I", "S", "I", "E")

MONTHS_RO = (
    "Ianuarie",
    "Februarie",
    "Martie",
    "Aprilie",
    "Mai",
    "Iunie",
    "Iulie",
    "August",
    "Septembrie",
    "Octombrie",
    "Noiembrie",
    "Decembrie",
)

# Monday first, matching date.weekday().
WEEKDAYS_RO = ("L", "M", "Mi", "J", "V", "S", "D")

LEGACY_SHIFT_HOURS = 24
DEFAULT_MAX_SHIFT_HOURS = 48
DEFAULT_BUSINESS_NAME = "Firma 1"
DEFAULT_LOCATION_NAME = "Ansamblul Petrila"
DEFAULT_MIN_PASSWORD_LENGTH = 6
MEMBERSHIP_RETRY_ATTEMPTS = 3
