"""Mapping of provider condition codes to display icons."""

DEFAULT_ICON = "cloud"

# OpenWeatherMap icon codes; the d/n suffix is day/night
ICON_MAP = {
    "01d": "sun",
    "01n": "moon",
    "02d": "cloud-sun",
    "02n": "cloud-moon",
    "03d": "cloud",
    "03n": "cloud",
    "04d": "cloud",
    "04n": "cloud",
    "09d": "cloud-showers-heavy",
    "09n": "cloud-showers-heavy",
    "10d": "cloud-rain",
    "10n": "cloud-rain",
    "11d": "bolt",
    "11n": "bolt",
    "13d": "snowflake",
    "13n": "snowflake",
    "50d": "smog",
    "50n": "smog",
}

ICON_GLYPHS = {
    "sun": "☀️",
    "moon": "🌙",
    "cloud-sun": "⛅",
    "cloud-moon": "☁️",
    "cloud": "☁️",
    "cloud-showers-heavy": "🌧️",
    "cloud-rain": "🌦️",
    "bolt": "⛈️",
    "snowflake": "❄️",
    "smog": "🌫️",
}


def map_condition_to_icon(code: str | None) -> str:
    """Return the icon id for a condition code; unknown codes get a cloud."""
    return ICON_MAP.get(code or "", DEFAULT_ICON)


def icon_glyph(icon_id: str) -> str:
    return ICON_GLYPHS.get(icon_id, ICON_GLYPHS[DEFAULT_ICON])
