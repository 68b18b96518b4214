"""Search bar for filtering history."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input, Label

MATCH_FOUND = "Match found"
NO_MATCH_FOUND = "No match found"


class SearchBar(Horizontal):
    """Search input with Search and Reset buttons and a result label."""

    DEFAULT_CSS = """
    SearchBar {
        height: 3;
        width: 100%;
    }

    SearchBar > #search-label {
        padding: 1 1 0 1;
    }

    SearchBar > #search-input {
        width: 1fr;
    }

    SearchBar > Button {
        min-width: 10;
    }

    SearchBar > #search-result {
        padding: 1 1 0 1;
        min-width: 16;
    }

    SearchBar > #search-result.no-match {
        color: $warning;
    }
    """

    class SearchRequested(Message):
        """Message emitted when a non-empty search term is submitted."""

        def __init__(self, term: str) -> None:
            super().__init__()
            self.term = term

    class SearchReset(Message):
        """Message emitted when the search is reset."""

        pass

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.result_text = ""

    def compose(self) -> ComposeResult:
        yield Label("Search:", id="search-label")
        yield Input(placeholder="Search history...", id="search-input")
        yield Button("Search", id="search-btn")
        yield Button("Reset Search", id="reset-btn")
        yield Label("", id="search-result")

    @property
    def search_input(self) -> Input:
        return self.query_one("#search-input", Input)

    def submit(self) -> None:
        """Emit the trimmed search term. Blank input is ignored."""
        term = self.search_input.value.strip()
        if term:
            self.post_message(self.SearchRequested(term))

    def reset(self) -> None:
        """Clear the input and result label, then announce the reset."""
        self.search_input.value = ""
        self.show_result(None)
        self.post_message(self.SearchReset())

    def show_result(self, found: bool | None) -> None:
        """Show whether the last search matched. None clears the label."""
        label = self.query_one("#search-result", Label)
        if found is None:
            self.result_text = ""
        elif found:
            self.result_text = MATCH_FOUND
        else:
            self.result_text = NO_MATCH_FOUND
        label.update(self.result_text)
        label.set_class(found is False, "no-match")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            event.stop()
            self.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "search-btn":
            event.stop()
            self.submit()
        elif event.button.id == "reset-btn":
            event.stop()
            self.reset()
