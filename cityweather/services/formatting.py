"""Formatting helpers for weather values and timestamps."""

import math
from datetime import datetime, tzinfo


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_temperature(value: float) -> str:
    return f"{round_half_up(value)}°C"


def format_wind(speed_ms: float) -> str:
    """Format a wind speed given in m/s as km/h."""
    return f"{round_half_up(speed_ms * 3.6)} km/h"


def format_city_name(city: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in city.split(" "))


def capitalize_first(text: str) -> str:
    """Uppercase only the first character (e.g. provider descriptions)."""
    return text[:1].upper() + text[1:]


def _local(ts: datetime, tz: tzinfo | None) -> datetime:
    """Convert to the observer's zone; None means the system local zone."""
    return ts.astimezone(tz)


def format_time(ts: datetime, tz: tzinfo | None = None) -> str:
    """Format as a 12-hour clock time, e.g. '02:30 PM'."""
    return _local(ts, tz).strftime("%I:%M %p")


def format_date(ts: datetime, show_time: bool = False, tz: tzinfo | None = None) -> str:
    """Format as e.g. 'Monday, January 15, 2024', optionally with the time."""
    local = _local(ts, tz)
    text = f"{local.strftime('%A, %B')} {local.day}, {local.year}"
    if show_time:
        text = f"{text}, {format_time(ts, tz)}"
    return text


def format_day_name(ts: datetime, tz: tzinfo | None = None) -> str:
    """Short weekday name, e.g. 'Mon'."""
    return _local(ts, tz).strftime("%a")
