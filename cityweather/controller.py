"""Search controller: the state machine behind the weather view."""

import logging
from collections.abc import Callable
from datetime import tzinfo

from .exceptions import InputValidationError, WeatherError
from .models.view_state import ViewState
from .models.weather import SearchResult
from .services.location import LocationState
from .services.storage import RecentSearches
from .services.validation import validate_city
from .services.weather_client import WeatherClient

logger = logging.getLogger(__name__)

StateListener = Callable[[ViewState], None]


class SearchController:
    """Owns the current ViewState and moves it through a search.

    Idle/Empty/Error --submit(valid)--> Loading --> Content | Error.
    Invalid input only sets `field_error`; the view state is untouched.
    """

    def __init__(
        self,
        client: WeatherClient,
        recent: RecentSearches,
        location: LocationState,
        tz: tzinfo | None = None,
        on_change: StateListener | None = None,
    ):
        self.client = client
        self.recent = recent
        self.location = location
        self.tz = tz
        self.on_change = on_change
        self.state = ViewState.idle()
        self.field_error: str | None = None
        self.input_value = ""
        self._sequence = 0

    @property
    def sequence(self) -> int:
        """Token of the most recently started search."""
        return self._sequence

    def _set_state(self, state: ViewState) -> None:
        self.state = state
        if self.on_change is not None:
            self.on_change(state)

    def _validate(self, raw: str) -> str | None:
        self.field_error = None
        try:
            return validate_city(raw)
        except InputValidationError as e:
            self.field_error = e.message
            return None

    async def submit(self, raw: str) -> bool:
        """Handle a form submission. Returns True if a search was started."""
        self.input_value = raw
        city = self._validate(raw)
        if city is None:
            # Re-notify so the field error is shown; the view state stays as is
            self._set_state(self.state)
            return False
        return await self.search(city)

    async def retry(self, raw: str | None = None) -> bool:
        """Retry with the current input; an empty or invalid input shows the empty view."""
        if raw is not None:
            self.input_value = raw
        self.field_error = None
        city = self._validate(self.input_value) if self.input_value.strip() else None
        if city is None:
            # Supersede any search still in flight
            self._sequence += 1
            self._set_state(ViewState.empty())
            return False
        return await self.search(city)

    async def search(self, city: str, push_location: bool = True) -> bool:
        """Fetch weather for a city. Returns True if this search rendered content."""
        self._sequence += 1
        token = self._sequence
        self.input_value = city
        self.field_error = None
        self._set_state(ViewState.loading(city))

        try:
            result: SearchResult = await self.client.fetch_weather(city, tz=self.tz)
        except WeatherError as e:
            if token != self._sequence:
                logger.debug(f"Discarding stale failure for {city}")
                return False
            logger.warning(f"Search for {city} failed: {e}")
            self._set_state(ViewState.error(e.message))
            return False
        except Exception as e:
            if token != self._sequence:
                return False
            logger.exception(f"Unexpected error searching {city}")
            self._set_state(ViewState.error(str(e)))
            return False

        if token != self._sequence:
            logger.debug(f"Discarding stale result for {city}")
            return False

        self.recent.add(city)
        if push_location:
            self.location.push_city(city)
        self._set_state(ViewState.content(result))
        return True

    async def start(self) -> bool:
        """Search the city carried by the startup link, if any."""
        city = self.location.initial_city
        if not city:
            return False
        self.input_value = city
        return await self.search(city, push_location=False)

    async def go_back(self) -> bool:
        """Step back through the location history and show that city."""
        if not self.location.can_go_back:
            return False
        return await self._navigate(self.location.back())

    async def go_forward(self) -> bool:
        """Step forward through the location history and show that city."""
        if not self.location.can_go_forward:
            return False
        return await self._navigate(self.location.forward())

    async def _navigate(self, city: str | None) -> bool:
        if city is None:
            # History entry without a city: back to the initial view
            self._sequence += 1
            self.input_value = ""
            self._set_state(ViewState.idle())
            return False
        return await self.search(city, push_location=False)
