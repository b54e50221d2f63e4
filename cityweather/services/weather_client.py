"""Weather client for the OpenWeatherMap current weather and forecast APIs."""

import asyncio
import logging
from datetime import UTC, datetime, tzinfo
from typing import Any

import httpx

from ..exceptions import MalformedResponseError, UpstreamError
from ..models.config import Config
from ..models.weather import ForecastSample, SearchResult, WeatherSnapshot
from .forecast_selector import select_daily_forecasts

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.openweathermap.org/data/2.5"

CURRENT_FAILURE_MESSAGE = "Failed to fetch weather data"
FORECAST_FAILURE_MESSAGE = "Failed to fetch forecast data"
INVALID_FORECAST_MESSAGE = "Invalid forecast data received"
INVALID_WEATHER_MESSAGE = "Invalid weather data received"


def _timestamp(value: Any) -> datetime:
    return datetime.fromtimestamp(int(value), tz=UTC)


def _provider_message(response: httpx.Response, fallback: str) -> str:
    """Pull the provider's error text out of an error response."""
    try:
        data = response.json()
    except ValueError:
        return fallback
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if message:
            return str(message)
    return fallback


class WeatherClient:
    """Fetches current conditions and forecasts by city name.

    Every call is a single best-effort attempt: no retries and no caching.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE_URL,
        units: str = "metric",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @classmethod
    def from_config(cls, config: Config) -> "WeatherClient":
        return cls(
            api_key=config.resolve_api_key(),
            base_url=config.provider.base_url,
            units=config.provider.units,
            timeout=config.provider.timeout_seconds,
        )

    async def __aenter__(self) -> "WeatherClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, endpoint: str, city: str, failure_message: str) -> dict:
        """GET an endpoint for a city and return the decoded JSON object."""
        params = {"q": city, "appid": self.api_key, "units": self.units}
        url = f"{self.base_url}/{endpoint}"

        try:
            response = await self._client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout fetching {endpoint} for {city}: {e}")
            raise UpstreamError("Request timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Connection error fetching {endpoint} for {city}: {e}")
            raise UpstreamError(failure_message) from e

        if not response.is_success:
            message = _provider_message(response, failure_message)
            logger.error(f"HTTP {response.status_code} fetching {endpoint} for {city}: {message}")
            raise UpstreamError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {endpoint} for {city}: {e}")
            raise MalformedResponseError(f"{failure_message}: response is not valid JSON") from e

        if not isinstance(data, dict):
            raise MalformedResponseError(f"{failure_message}: unexpected response body")
        return data

    async def fetch_current(self, city: str) -> WeatherSnapshot:
        """Fetch current conditions for a city."""
        data = await self._get("weather", city, CURRENT_FAILURE_MESSAGE)
        return self._parse_current(data)

    async def fetch_forecast(self, city: str) -> list[ForecastSample]:
        """Fetch the 5-day / 3-hour forecast for a city."""
        data = await self._get("forecast", city, FORECAST_FAILURE_MESSAGE)
        items = data.get("list")
        if not isinstance(items, list):
            logger.error(f"Forecast for {city} has no list field")
            raise MalformedResponseError(INVALID_FORECAST_MESSAGE)
        return [self._parse_sample(item) for item in items]

    async def fetch_weather(self, city: str, tz: tzinfo | None = None) -> SearchResult:
        """Fetch current weather and forecast concurrently.

        If either request fails the whole lookup fails; nothing partial is
        returned.
        """
        current_task = asyncio.ensure_future(self.fetch_current(city))
        forecast_task = asyncio.ensure_future(self.fetch_forecast(city))
        try:
            current, samples = await asyncio.gather(current_task, forecast_task)
        except Exception:
            current_task.cancel()
            forecast_task.cancel()
            await asyncio.gather(current_task, forecast_task, return_exceptions=True)
            raise

        daily = select_daily_forecasts(samples, tz=tz)
        logger.debug(f"Fetched weather for {city}: {len(samples)} samples, {len(daily)} days")
        return SearchResult(city=city, current=current, daily=daily)

    def _parse_current(self, data: dict) -> WeatherSnapshot:
        """Parse the current weather response."""
        try:
            main = data["main"]
            condition = (data.get("weather") or [{}])[0]
            return WeatherSnapshot(
                city=data["name"],
                country=data.get("sys", {}).get("country", ""),
                observed_at=_timestamp(data["dt"]),
                temperature=main["temp"],
                feels_like=main.get("feels_like", main["temp"]),
                humidity=main["humidity"],
                pressure=main["pressure"],
                wind_speed=data.get("wind", {}).get("speed", 0.0),
                condition_code=condition.get("icon", ""),
                description=condition.get("description", ""),
            )
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Error parsing weather response: {e}")
            raise MalformedResponseError(INVALID_WEATHER_MESSAGE) from e

    def _parse_sample(self, item: Any) -> ForecastSample:
        """Parse one entry of the forecast list."""
        try:
            condition = (item.get("weather") or [{}])[0]
            return ForecastSample(
                timestamp=_timestamp(item["dt"]),
                temperature=item["main"]["temp"],
                condition_code=condition.get("icon", ""),
                description=condition.get("description", ""),
            )
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Error parsing forecast entry: {e}")
            raise MalformedResponseError(INVALID_FORECAST_MESSAGE) from e
