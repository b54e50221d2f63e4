"""City name input validation."""

import re

from ..exceptions import InputValidationError

EMPTY_CITY_MESSAGE = "Please enter a city name"
INVALID_CITY_MESSAGE = "City name should only contain letters, spaces, and hyphens"

CITY_PATTERN = re.compile(r"^[a-zA-Z\s\-]+$")


def validate_city(raw: str | None) -> str:
    """Return the stripped city name or raise InputValidationError."""
    city = (raw or "").strip()
    if not city:
        raise InputValidationError(EMPTY_CITY_MESSAGE)
    if not CITY_PATTERN.match(city):
        raise InputValidationError(INVALID_CITY_MESSAGE)
    return city
