"""Weather panel component: renders one ViewState at a time."""

from datetime import tzinfo

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, Static

from ..models.view_state import ViewKind, ViewState
from ..models.weather import ForecastSample, WeatherSnapshot
from ..services.formatting import (
    capitalize_first,
    format_date,
    format_day_name,
    format_temperature,
    format_wind,
)
from ..services.icons import icon_glyph, map_condition_to_icon

IDLE_MESSAGE = "Search for a city to see the weather"
EMPTY_MESSAGE = "Enter a city name above to get started"

SECTION_IDS = {
    ViewKind.IDLE: "weather-idle",
    ViewKind.LOADING: "weather-loading",
    ViewKind.CONTENT: "weather-content",
    ViewKind.EMPTY: "weather-empty",
    ViewKind.ERROR: "weather-error",
}


def escape_markup(text: str) -> str:
    """Escape Rich markup characters in provider or user content."""
    return text.replace("[", r"\[").replace("]", r"\]")


def temp_color(temp: float) -> str:
    """Get color for temperature value."""
    if temp <= 0:
        return "blue"
    elif temp <= 10:
        return "cyan"
    elif temp <= 20:
        return "green"
    elif temp <= 30:
        return "yellow"
    return "red"


def render_current(snapshot: WeatherSnapshot, tz: tzinfo | None = None) -> str:
    """Build the markup for the current conditions block."""
    tc = temp_color(snapshot.temperature)
    glyph = icon_glyph(map_condition_to_icon(snapshot.condition_code))
    description = escape_markup(capitalize_first(snapshot.description))
    return (
        f"[bold]{escape_markup(snapshot.display_location)}[/bold]\n"
        f"[dim]{format_date(snapshot.observed_at, tz=tz)}[/dim]\n"
        f"{glyph}  [{tc} bold]{format_temperature(snapshot.temperature)}[/{tc} bold]  "
        f"{description}\n"
        f"Feels like {format_temperature(snapshot.feels_like)}  "
        f"Wind {format_wind(snapshot.wind_speed)}  "
        f"Humidity {snapshot.humidity}%  "
        f"Pressure {snapshot.pressure} hPa"
    )


def render_forecast_card(sample: ForecastSample, tz: tzinfo | None = None) -> str:
    """Build the markup for one daily forecast card."""
    tc = temp_color(sample.temperature)
    glyph = icon_glyph(map_condition_to_icon(sample.condition_code))
    return (
        f"[bold]{format_day_name(sample.timestamp, tz=tz)}[/bold]\n"
        f"{glyph}\n"
        f"[{tc}]{format_temperature(sample.temperature)}[/{tc}]\n"
        f"[dim]{escape_markup(capitalize_first(sample.description))}[/dim]"
    )


class WeatherPanel(Static):
    """Panel displaying the idle, loading, content, empty or error view."""

    DEFAULT_CSS = """
    WeatherPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    WeatherPanel .weather-section {
        display: none;
    }

    WeatherPanel .weather-section.visible {
        display: block;
    }

    WeatherPanel #weather-error {
        color: $error;
    }

    WeatherPanel #weather-empty, WeatherPanel #weather-idle {
        color: $text-muted;
    }

    WeatherPanel #weather-content {
        height: auto;
    }

    WeatherPanel #weather-forecast {
        height: auto;
        margin-top: 1;
    }

    WeatherPanel .forecast-card {
        width: 1fr;
        height: auto;
        border: round $secondary;
        content-align: center middle;
        text-align: center;
    }
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        super().__init__()
        self.tz = tz
        self._state = ViewState.idle()

    @property
    def state(self) -> ViewState:
        return self._state

    def compose(self) -> ComposeResult:
        yield Label(IDLE_MESSAGE, id="weather-idle", classes="weather-section visible")
        yield Label("[dim]Loading...[/dim]", id="weather-loading", classes="weather-section")
        yield Label(EMPTY_MESSAGE, id="weather-empty", classes="weather-section")
        yield Label("", id="weather-error", classes="weather-section")
        with Vertical(id="weather-content", classes="weather-section"):
            yield Static("", id="weather-current")
            yield Horizontal(id="weather-forecast")

    def render_state(self, state: ViewState) -> None:
        """Show exactly the section belonging to the state."""
        self._state = state

        if state.kind == ViewKind.LOADING:
            city = escape_markup(state.city)
            self.query_one("#weather-loading", Label).update(
                f"[dim]Loading weather for {city}...[/dim]"
            )
        elif state.kind == ViewKind.ERROR:
            self.query_one("#weather-error", Label).update(
                f"[red]{escape_markup(state.message)}[/red]\n[dim]Press r to try again[/dim]"
            )
        elif state.kind == ViewKind.CONTENT and state.result is not None:
            self._render_content(state)

        for kind, section_id in SECTION_IDS.items():
            self.query_one(f"#{section_id}").set_class(kind == state.kind, "visible")

    def _render_content(self, state: ViewState) -> None:
        result = state.result
        self.query_one("#weather-current", Static).update(render_current(result.current, self.tz))

        forecast = self.query_one("#weather-forecast", Horizontal)
        forecast.remove_children()
        if result.daily:
            forecast.mount_all(
                Static(render_forecast_card(sample, self.tz), classes="forecast-card")
                for sample in result.daily
            )
        else:
            forecast.mount(Static("[dim]No forecast[/dim]"))
