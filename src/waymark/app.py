"""Main Textual application for Waymark."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Static

from .actions import BookmarkActionsMixin, NavigationActionsMixin, SearchActionsMixin
from .config import Config
from .history import HistoryTracker
from .widgets import Banner, HistoryList, SearchBar, UrlBar

logger = logging.getLogger(__name__)

# Toolbar button id -> action method
TOOLBAR_ACTIONS = {
    "back-btn": "action_go_back",
    "forward-btn": "action_go_forward",
    "undo-btn": "action_undo",
    "redo-btn": "action_redo",
    "clear-btn": "action_clear_history",
    "bookmark-btn": "action_bookmark_page",
    "bookmarks-btn": "action_view_bookmarks",
}


class WaymarkApp(
    NavigationActionsMixin, BookmarkActionsMixin, SearchActionsMixin, App
):
    """Waymark - Browsing History Tracker."""

    TITLE = "Waymark"
    SUB_TITLE = "Browsing History Tracker"

    CSS = """
    #toolbar {
        height: 3;
        width: 100%;
    }

    #toolbar Button {
        min-width: 8;
        margin: 0 1 0 0;
    }

    #history-list {
        height: 1fr;
        border: solid $accent;
    }

    #history-list:focus-within {
        border: solid cyan;
    }

    #status {
        height: 1;
        padding: 0 1;
        background: $primary-background;
        color: $text-muted;
    }
    """

    # F-keys so bindings still fire while an Input has focus
    BINDINGS = [
        Binding("f2", "go_back", "Back"),
        Binding("f3", "go_forward", "Forward"),
        Binding("f4", "undo", "Undo"),
        Binding("f5", "redo", "Redo"),
        Binding("f6", "bookmark_page", "Bookmark"),
        Binding("f7", "view_bookmarks", "Bookmarks"),
        Binding("f8", "clear_history", "Clear"),
        Binding("escape", "reset_search", "Reset Search", show=False),
        Binding("f1", "help", "Help"),
        Binding("?", "help", "Help", show=False),
    ]

    def __init__(self, config: Config, tracker: HistoryTracker | None = None) -> None:
        super().__init__()
        self.config = config
        self.tracker = tracker if tracker is not None else HistoryTracker()

    def compose(self) -> ComposeResult:
        yield Banner()
        yield UrlBar(id="url-bar")
        with Horizontal(id="toolbar"):
            yield Button("Back", id="back-btn")
            yield Button("Forward", id="forward-btn")
            yield Button("Undo", id="undo-btn")
            yield Button("Redo", id="redo-btn")
            yield Button("Clear History", id="clear-btn", variant="error")
            yield Button("Bookmark Page", id="bookmark-btn", variant="primary")
            yield Button("View Bookmarks", id="bookmarks-btn")
        yield HistoryList(
            max_entries=self.config.display.max_entries,
            id="history-list",
            classes="panel",
        )
        yield SearchBar(id="search-bar")
        yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        """Visit the home page if configured and render the initial state."""
        if self.config.home_page:
            self.tracker.visit(self.config.home_page)
            logger.info("Opened home page %s", self.config.home_page)
        self._refresh_history()
        self.query_one("#url-bar", UrlBar).url_input.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Dispatch toolbar buttons to their actions."""
        action = TOOLBAR_ACTIONS.get(event.button.id or "")
        if action is not None:
            getattr(self, action)()

    def _refresh_history(self) -> None:
        """Re-render the history list and status line from the tracker."""
        history_list = self.query_one("#history-list", HistoryList)
        history_list.show_history(self.tracker.get_history())
        self.query_one("#search-bar", SearchBar).show_result(None)
        self.query_one("#status", Static).update(self._status_text())

    def _status_text(self) -> str:
        current = self.tracker.current_url or "(no page)"
        available = [
            name
            for name, enabled in (
                ("back", self.tracker.can_go_back),
                ("forward", self.tracker.can_go_forward),
                ("undo", self.tracker.can_undo),
                ("redo", self.tracker.can_redo),
            )
            if enabled
        ]
        return f"Current: {current}  │  Available: {', '.join(available) or 'none'}"

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "F2=Back, F3=Forward, F4=Undo, F5=Redo, F6=Bookmark, F7=Bookmarks, F8=Clear, Esc=Reset Search, Ctrl+Q=Quit",
            timeout=5,
        )


def run_app(config: Config) -> None:
    """Run the Waymark application."""
    app = WaymarkApp(config)
    app.run()
