"""Services for fetching weather and keeping search state."""

from .location import LocationState
from .storage import KeyValueStore, RecentSearches
from .weather_client import WeatherClient

__all__ = ["KeyValueStore", "LocationState", "RecentSearches", "WeatherClient"]
