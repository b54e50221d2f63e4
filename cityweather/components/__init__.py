"""UI components for the weather app."""

from .recent_searches_panel import RecentSearchesPanel
from .search_form import SearchForm
from .status_bar import StatusBar
from .weather_panel import WeatherPanel

__all__ = ["RecentSearchesPanel", "SearchForm", "StatusBar", "WeatherPanel"]
