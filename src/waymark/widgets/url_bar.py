"""URL entry bar."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input


class UrlBar(Horizontal):
    """Input field and Visit button for entering URLs."""

    DEFAULT_CSS = """
    UrlBar {
        height: 3;
        width: 100%;
    }

    UrlBar > #url-input {
        width: 1fr;
    }

    UrlBar > #visit-btn {
        min-width: 10;
        background: $primary;
    }
    """

    class VisitRequested(Message):
        """Message emitted when a non-empty URL is submitted."""

        def __init__(self, url: str) -> None:
            super().__init__()
            self.url = url

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Enter URL...", id="url-input")
        yield Button("Visit", id="visit-btn")

    @property
    def url_input(self) -> Input:
        return self.query_one("#url-input", Input)

    def submit(self) -> None:
        """Emit the trimmed URL and clear the input. Blank input is ignored."""
        url_input = self.url_input
        url = url_input.value.strip()
        if not url:
            return
        self.post_message(self.VisitRequested(url))
        url_input.value = ""

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "url-input":
            event.stop()
            self.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "visit-btn":
            event.stop()
            self.submit()
