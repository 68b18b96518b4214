"""History list widget for displaying visited URLs."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, ListItem, ListView, Static

# Default maximum entries to display before showing "Show more" item
MAX_DISPLAY_ENTRIES = 500


class EntryItem(ListItem):
    """A list item representing a URL."""

    def __init__(self, url: str, is_current: bool = False) -> None:
        super().__init__()
        self.url = url
        self.is_current = is_current
        if is_current:
            self.add_class("current")

    def compose(self) -> ComposeResult:
        marker = "▸ " if self.is_current else "  "
        yield Label(f"{marker}{self.url}")


class ShowMoreEntriesItem(ListItem):
    """A list item that expands the list to every entry."""

    DEFAULT_CSS = """
    ShowMoreEntriesItem {
        color: $text-muted;
        text-style: italic;
    }
    """

    def __init__(self, total_count: int, displayed_count: int) -> None:
        super().__init__()
        self.total_count = total_count
        self.remaining = total_count - displayed_count

    def compose(self) -> ComposeResult:
        yield Label(f"... show {self.remaining} more ({self.total_count} total)")


class HistoryList(Vertical):
    """Widget displaying history, or search results over it."""

    DEFAULT_CSS = """
    HistoryList {
        width: 1fr;
        height: 1fr;
    }

    HistoryList > #history-header {
        background: $primary-background;
        color: $accent;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    HistoryList > #history-list-view {
        height: 1fr;
    }

    HistoryList ListItem {
        padding: 0 1;
    }

    HistoryList ListItem.current {
        text-style: bold;
    }

    HistoryList ListItem:hover {
        background: $boost;
    }

    HistoryList ListItem.--highlight {
        background: $accent;
    }
    """

    def __init__(self, max_entries: int = MAX_DISPLAY_ENTRIES, **kwargs) -> None:
        super().__init__(**kwargs)
        self._max_entries = max_entries
        self._entries: list[str] = []  # Displayed entries
        self._all_entries: list[str] = []  # Full list before truncation
        self._mark_first = False
        self._header_text = "HISTORY"

    def compose(self) -> ComposeResult:
        yield Static("HISTORY", id="history-header")
        yield ListView(id="history-list-view")

    @property
    def list_view(self) -> ListView:
        return self.query_one("#history-list-view", ListView)

    @property
    def entries(self) -> list[str]:
        """Entries currently rendered, excluding the "show more" row."""
        return list(self._entries)

    def get_header_text(self) -> str:
        return self._header_text

    def show_history(self, urls: list[str]) -> None:
        """Render the history list, marking the first entry as current."""
        self._show_entries(urls, f"HISTORY ({len(urls)})", mark_first=True)

    def show_search_results(self, term: str, urls: list[str]) -> None:
        """Render search results for a term."""
        self._show_entries(urls, f'SEARCH "{term}" ({len(urls)})', mark_first=False)

    def _show_entries(self, urls: list[str], header_text: str, mark_first: bool) -> None:
        self._all_entries = urls
        self._mark_first = mark_first
        self._header_text = header_text
        self.query_one("#history-header", Static).update(header_text)

        # Apply display cap for large histories
        if len(urls) > self._max_entries:
            display_entries = urls[: self._max_entries]
        else:
            display_entries = urls

        self._populate(display_entries)

        if len(urls) > len(display_entries):
            self.list_view.append(
                ShowMoreEntriesItem(len(urls), len(display_entries))
            )

    def _populate(self, urls: list[str]) -> None:
        self._entries = urls
        list_view = self.list_view
        list_view.clear()
        for index, url in enumerate(urls):
            list_view.append(EntryItem(url, is_current=self._mark_first and index == 0))
        if urls:
            list_view.index = 0

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Expand the list when the "show more" row is selected."""
        if event.item is not None and isinstance(event.item, ShowMoreEntriesItem):
            self._populate(self._all_entries)
