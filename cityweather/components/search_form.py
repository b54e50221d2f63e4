"""Search form: city input with inline validation message."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Input, Label


class SearchForm(Vertical):
    """City input, search and retry buttons, and the field error label."""

    DEFAULT_CSS = """
    SearchForm {
        height: auto;
        padding: 0 1;
    }

    SearchForm Horizontal {
        height: auto;
    }

    SearchForm #city-input {
        width: 1fr;
    }

    SearchForm #city-input.is-invalid {
        border: tall $error;
    }

    SearchForm #city-error {
        color: $error;
        height: auto;
    }
    """

    class Submitted(Message):
        """Posted when the user submits a city."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class RetryRequested(Message):
        """Posted when the user asks to try again."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Input(placeholder="Enter a city name", id="city-input")
            yield Button("Search", id="search-btn", variant="primary")
            yield Button("Try again", id="try-again-btn")
        yield Label("", id="city-error")

    @property
    def value(self) -> str:
        return self.query_one("#city-input", Input).value

    @value.setter
    def value(self, text: str) -> None:
        self.query_one("#city-input", Input).value = text

    def set_field_error(self, message: str | None) -> None:
        """Show or clear the inline validation message."""
        self.query_one("#city-input", Input).set_class(bool(message), "is-invalid")
        self.query_one("#city-error", Label).update(message or "")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "search-btn":
            self.post_message(self.Submitted(self.value))
        elif event.button.id == "try-again-btn":
            self.post_message(self.RetryRequested(self.value))
