"""Data models for the weather app."""

from .config import Config, ProviderConfig, Settings
from .view_state import ViewKind, ViewState
from .weather import ForecastSample, SearchResult, WeatherSnapshot

__all__ = [
    "Config",
    "ForecastSample",
    "ProviderConfig",
    "SearchResult",
    "Settings",
    "ViewKind",
    "ViewState",
    "WeatherSnapshot",
]
