"""Bookmarks modal."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, ListItem, ListView, Static


class BookmarkItem(ListItem):
    """A list item representing a bookmarked URL."""

    def __init__(self, url: str) -> None:
        super().__init__()
        self.url = url

    def compose(self) -> ComposeResult:
        yield Label(self.url)


class BookmarksModal(ModalScreen):
    """Modal screen listing bookmarks in the order they were added."""

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
    ]

    CSS = """
    BookmarksModal {
        align: center middle;
    }

    #bookmarks-container {
        width: 60;
        height: auto;
        max-height: 24;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #bookmarks-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #bookmarks-list-view {
        height: auto;
        max-height: 15;
        background: $surface-darken-1;
    }

    #bookmarks-empty {
        color: $text-muted;
        text-style: italic;
        text-align: center;
    }

    #button-row {
        margin-top: 1;
        height: 3;
        align: center middle;
    }

    #close-btn {
        min-width: 12;
    }
    """

    def __init__(self, bookmarks: list[str]) -> None:
        super().__init__()
        self.bookmarks = bookmarks

    def compose(self) -> ComposeResult:
        with Vertical(id="bookmarks-container"):
            yield Static(f"BOOKMARKS ({len(self.bookmarks)})", id="bookmarks-title")
            if self.bookmarks:
                yield ListView(
                    *(BookmarkItem(url) for url in self.bookmarks),
                    id="bookmarks-list-view",
                )
            else:
                yield Static("No bookmarks yet", id="bookmarks-empty")
            with Horizontal(id="button-row"):
                yield Button("Close", id="close-btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-btn":
            event.stop()
            self.dismiss()

    def action_close(self) -> None:
        self.dismiss()
