"""Navigation action handlers for WaymarkApp."""

from __future__ import annotations

import logging

from ..widgets import UrlBar

logger = logging.getLogger(__name__)


class NavigationActionsMixin:
    """Mixin providing visit, back/forward, undo/redo and clear actions.

    Every action calls the tracker and then re-renders the history list.
    """

    def on_url_bar_visit_requested(self, event: UrlBar.VisitRequested) -> None:
        """Handle a URL submitted from the URL bar."""
        self.tracker.visit(event.url)
        logger.info("Visited %s", event.url)
        self._refresh_history()

    def action_go_back(self) -> None:
        """Go back one page."""
        self.tracker.go_back()
        self._refresh_history()

    def action_go_forward(self) -> None:
        """Go forward one page."""
        self.tracker.go_forward()
        self._refresh_history()

    def action_undo(self) -> None:
        """Undo the last change of current page."""
        self.tracker.undo()
        self._refresh_history()

    def action_redo(self) -> None:
        """Redo the last undone change of current page."""
        self.tracker.redo()
        self._refresh_history()

    def action_clear_history(self) -> None:
        """Clear history. Bookmarks are kept."""
        self.tracker.clear_history()
        logger.info("History cleared")
        self._refresh_history()
        self.notify("History cleared")
