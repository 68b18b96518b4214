"""Search action handlers for WaymarkApp."""

from __future__ import annotations

import logging

from ..widgets import HistoryList, SearchBar

logger = logging.getLogger(__name__)


class SearchActionsMixin:
    """Mixin providing history search and reset."""

    def on_search_bar_search_requested(
        self, event: SearchBar.SearchRequested
    ) -> None:
        """Show history entries matching the submitted term."""
        results = self.tracker.search_history(event.term)
        logger.info("Search %r matched %d entries", event.term, len(results))

        history_list = self.query_one("#history-list", HistoryList)
        history_list.show_search_results(event.term, results)

        search_bar = self.query_one("#search-bar", SearchBar)
        search_bar.show_result(bool(results))

    def on_search_bar_search_reset(self, event: SearchBar.SearchReset) -> None:
        """Return to the full history view."""
        self._refresh_history()

    def action_reset_search(self) -> None:
        """Clear the search and show the full history."""
        self.query_one("#search-bar", SearchBar).reset()
