"""City Weather - look up current conditions and a 5-day forecast by city name."""

__version__ = "1.0.0"
