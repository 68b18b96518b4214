"""Bookmark action handlers for WaymarkApp."""

from __future__ import annotations

import logging

from ..widgets import BookmarksModal

logger = logging.getLogger(__name__)


class BookmarkActionsMixin:
    """Mixin providing bookmark actions."""

    def action_bookmark_page(self) -> None:
        """Bookmark the current page."""
        url = self.tracker.current_url
        if url is None:
            self.notify("No page to bookmark", severity="warning")
            return

        self.tracker.bookmark_page()
        logger.info("Bookmarked %s", url)
        self.notify(f"Bookmarked {url}")

    def action_view_bookmarks(self) -> None:
        """Open the bookmarks window."""
        self.push_screen(BookmarksModal(self.tracker.get_bookmarks()))
