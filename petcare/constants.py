"""Infrastructure and technical constants."""

from typing import Final

# Technical configuration constants
DEFAULT_PORT: Final = 8000
DEFAULT_SEASON_TIMEZONE: Final = "UTC"
LOG_FILE_NAME: Final = "petcare.log"
