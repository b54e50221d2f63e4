"""Recent searches panel: one button per remembered city."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Label, Static

from .weather_panel import escape_markup


class RecentSearchButton(Button):
    """Button that remembers which city it stands for."""

    def __init__(self, city: str) -> None:
        super().__init__(escape_markup(city), classes="search-item")
        self.city = city


class RecentSearchesPanel(Static):
    """Row of recently searched cities."""

    DEFAULT_CSS = """
    RecentSearchesPanel {
        height: auto;
        padding: 0 1;
    }

    RecentSearchesPanel #recent-searches-list {
        height: auto;
    }

    RecentSearchesPanel .search-item {
        min-width: 8;
        margin-right: 1;
    }
    """

    class CitySelected(Message):
        """Posted when a recent city is clicked."""

        def __init__(self, city: str) -> None:
            super().__init__()
            self.city = city

    def __init__(self, cities: list[str] | None = None) -> None:
        super().__init__()
        self._cities = cities or []

    def compose(self) -> ComposeResult:
        yield Label("[dim]Recent searches[/dim]")
        with Horizontal(id="recent-searches-list"):
            for city in self._cities:
                yield RecentSearchButton(city)

    def update_cities(self, cities: list[str]) -> None:
        """Rebuild the button row."""
        self._cities = list(cities)
        row = self.query_one("#recent-searches-list", Horizontal)
        row.remove_children()
        row.mount_all(RecentSearchButton(city) for city in self._cities)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, RecentSearchButton):
            event.stop()
            self.post_message(self.CitySelected(event.button.city))
