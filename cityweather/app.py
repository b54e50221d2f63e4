"""Main Textual application wiring the controller to the widgets."""

import logging
from datetime import tzinfo

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from .components import RecentSearchesPanel, SearchForm, StatusBar, WeatherPanel
from .controller import SearchController
from .models.config import Config
from .models.view_state import ViewKind, ViewState
from .services.location import LocationState
from .services.storage import KeyValueStore, RecentSearches
from .services.weather_client import WeatherClient

logger = logging.getLogger(__name__)


class WeatherApp(App):
    """Terminal weather lookup: current conditions plus a 5-day forecast."""

    TITLE = "City Weather"

    CSS = """
    #main {
        height: 1fr;
        padding: 1 0;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "retry", "Retry"),
        Binding("left_square_bracket", "back", "Back"),
        Binding("right_square_bracket", "forward", "Forward"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        location: LocationState | None = None,
        client: WeatherClient | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        super().__init__()
        self.config = config or Config()
        settings = self.config.settings
        self.location = location or LocationState(settings.share_base_url)
        self.client = client or WeatherClient.from_config(self.config)
        self.recent = RecentSearches(
            KeyValueStore(settings.storage_path), limit=settings.recent_searches_limit
        )
        self.tz = tz
        self.controller = SearchController(
            client=self.client,
            recent=self.recent,
            location=self.location,
            tz=tz,
            on_change=self._render_state,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield SearchForm()
            yield RecentSearchesPanel(self.recent.items())
            yield WeatherPanel(tz=self.tz)
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(StatusBar).set_link(self.location.current_url)
        city = self.location.initial_city
        if city:
            self.query_one(SearchForm).value = city
            self.run_worker(self.controller.start(), group="search")

    async def on_unmount(self) -> None:
        await self.client.aclose()

    def _render_state(self, state: ViewState) -> None:
        """Push the controller's state into the widgets."""
        form = self.query_one(SearchForm)
        form.set_field_error(self.controller.field_error)
        self.query_one(WeatherPanel).render_state(state)

        # Searches started from recent items or history change the input too
        if state.kind in (ViewKind.LOADING, ViewKind.IDLE):
            if form.value != self.controller.input_value:
                form.value = self.controller.input_value

        if state.kind == ViewKind.CONTENT:
            self.query_one(RecentSearchesPanel).update_cities(self.recent.items())
            status = self.query_one(StatusBar)
            status.set_last_refresh()
            status.set_link(self.location.current_url)
        elif state.kind == ViewKind.IDLE:
            self.query_one(StatusBar).set_link(self.location.current_url)

    def on_search_form_submitted(self, message: SearchForm.Submitted) -> None:
        self.run_worker(self.controller.submit(message.value), group="search")

    def on_search_form_retry_requested(self, message: SearchForm.RetryRequested) -> None:
        self.run_worker(self.controller.retry(message.value), group="search")

    def on_recent_searches_panel_city_selected(
        self, message: RecentSearchesPanel.CitySelected
    ) -> None:
        self.run_worker(self.controller.search(message.city), group="search")

    def action_retry(self) -> None:
        self.run_worker(self.controller.retry(self.query_one(SearchForm).value), group="search")

    def action_back(self) -> None:
        self.run_worker(self.controller.go_back(), group="search")

    def action_forward(self) -> None:
        self.run_worker(self.controller.go_forward(), group="search")
