"""Status bar component showing the clock, last search and the share link."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from .weather_panel import escape_markup


class StatusBar(Horizontal):
    """Bottom status bar with time, refresh info, share link and keyboard hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar #status-time {
        width: auto;
    }

    StatusBar #status-refresh {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-link {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_refresh: datetime | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-refresh")
        yield Static("", id="status-link")
        yield Static("", id="status-spacer")
        yield Static(
            "[dim]r[/dim] Retry  [dim]\\[[/dim] Back  [dim]][/dim] Forward  [dim]q[/dim] Quit",
            id="status-hints",
        )

    def on_mount(self) -> None:
        """Start clock update timer."""
        self.set_interval(1, self._update_time)

    def _update_time(self) -> None:
        """Update the current time display."""
        now = datetime.now()
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")

        # Update relative refresh time
        if self._last_refresh:
            delta = now - self._last_refresh
            minutes = int(delta.total_seconds() // 60)
            if minutes == 0:
                refresh_text = "Updated just now"
            elif minutes == 1:
                refresh_text = "Updated 1 min ago"
            else:
                refresh_text = f"Updated {minutes} mins ago"
            self.query_one("#status-refresh", Static).update(f"[dim]{refresh_text}[/dim]")

    def set_last_refresh(self, time: datetime | None = None) -> None:
        """Update the last refresh timestamp."""
        self._last_refresh = time or datetime.now()
        self._update_time()

    def set_link(self, url: str) -> None:
        """Show the shareable link of the current search."""
        self.query_one("#status-link", Static).update(f"[dim]{escape_markup(url)}[/dim]")
