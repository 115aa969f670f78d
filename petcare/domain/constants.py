"""Domain business rules and constants."""

from typing import Final

# Request limits
MAX_AGE_YEARS: Final = 40.0
MAX_NOTES_LENGTH: Final = 200
NOTES_ECHO_LENGTH: Final = 120

# Life-stage thresholds (years)
JUVENILE_BELOW_AGE: Final = 1.0
ADULT_BELOW_AGE: Final = 7.0
SENIOR_FROM_AGE: Final = 8.0
