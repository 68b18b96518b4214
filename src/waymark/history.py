"""Browsing history tracker with back/forward, undo/redo and bookmarks.

Pages live in an arena keyed by an increasing integer id. Each page's
backward and forward links are stored as optional ids, and ``current`` is
an optional id. Visiting from the middle of the chain overwrites the
forward link of the current page, so the old forward branch drops out of
the navigable chain. Pages that nothing refers to any more are pruned
from the arena when a visit drops links to them.

None of the operations raise. Requests that make no sense in the current
state (going back with no history, undoing with an empty stack) are no-ops.
"""

import logging
from dataclasses import dataclass

from .navigation import PageStack

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """A visited page."""

    id: int
    url: str


class HistoryTracker:
    """Linear browsing history with undo/redo and a bookmark list."""

    def __init__(self) -> None:
        self._pages: dict[int, Page] = {}
        self._prev: dict[int, int] = {}
        self._next: dict[int, int] = {}
        self._next_id = 0
        self._current: int | None = None
        self._undo_stack = PageStack()
        self._redo_stack = PageStack()
        self._bookmarks: list[str] = []

    @property
    def current(self) -> Page | None:
        """The page presently being viewed, or None."""
        if self._current is None:
            return None
        return self._pages[self._current]

    @property
    def current_url(self) -> str | None:
        page = self.current
        return page.url if page else None

    @property
    def can_go_back(self) -> bool:
        return self._current is not None and self._current in self._prev

    @property
    def can_go_forward(self) -> bool:
        return self._current is not None and self._current in self._next

    @property
    def can_undo(self) -> bool:
        return not self._undo_stack.is_empty()

    @property
    def can_redo(self) -> bool:
        return not self._redo_stack.is_empty()

    def __len__(self) -> int:
        return len(self._pages)

    def visit(self, url: str) -> Page:
        """Visit a new page and make it current.

        Any forward history from the current page is replaced by the new
        page, and the redo stack is cleared. The URL is taken as given.

        Returns:
            The newly created page
        """
        page = Page(id=self._next_id, url=url)
        self._next_id += 1
        self._pages[page.id] = page

        # Pages can only become unreachable when a forward link is
        # overwritten or pending redo entries are dropped
        dropped_links = not self._redo_stack.is_empty()
        if self._current is not None:
            if self._current in self._next:
                dropped_links = True
            self._next[self._current] = page.id
            self._prev[page.id] = self._current

        self._undo_stack.push(self._current)
        self._current = page.id
        self._redo_stack.clear()
        if dropped_links:
            self._prune()

        logger.debug("Visited %s (page %d)", url, page.id)
        return page

    def go_back(self) -> None:
        """Move to the previous page in the chain, if any."""
        if not self.can_go_back:
            return
        self._redo_stack.push(self._current)
        self._current = self._prev[self._current]
        logger.debug("Back to %s", self.current_url)

    def go_forward(self) -> None:
        """Move to the next page in the chain, if any."""
        if not self.can_go_forward:
            return
        self._undo_stack.push(self._current)
        self._current = self._next[self._current]
        logger.debug("Forward to %s", self.current_url)

    def undo(self) -> None:
        """Restore the previous current page from the undo stack.

        The restored value may be None when undoing the very first visit.
        """
        if self._undo_stack.is_empty():
            return
        self._redo_stack.push(self._current)
        self._current = self._undo_stack.pop()
        logger.debug("Undo to %s", self.current_url)

    def redo(self) -> None:
        """Re-apply the most recently undone change of current page."""
        if self._redo_stack.is_empty():
            return
        self._undo_stack.push(self._current)
        self._current = self._redo_stack.pop()
        logger.debug("Redo to %s", self.current_url)

    def bookmark_page(self) -> None:
        """Bookmark the current page. Duplicates are kept."""
        page = self.current
        if page is None:
            return
        self._bookmarks.append(page.url)
        logger.debug("Bookmarked %s", page.url)

    def clear_history(self) -> None:
        """Forget all pages and undo/redo state. Bookmarks are kept."""
        self._current = None
        self._undo_stack.clear()
        self._redo_stack.clear()
        self._pages.clear()
        self._prev.clear()
        self._next.clear()
        logger.debug("History cleared")

    def get_history(self) -> list[str]:
        """Get URLs from the current page back to the oldest, most recent first."""
        urls: list[str] = []
        page_id = self._current
        while page_id is not None:
            urls.append(self._pages[page_id].url)
            page_id = self._prev.get(page_id)
        return urls

    def get_bookmarks(self) -> list[str]:
        """Get a copy of the bookmarks in insertion order."""
        return list(self._bookmarks)

    def search_history(self, term: str) -> list[str]:
        """Filter get_history() by case-insensitive substring match."""
        needle = term.lower()
        return [url for url in self.get_history() if needle in url.lower()]

    def _prune(self) -> None:
        """Drop pages no longer reachable from current or either stack."""
        roots = [self._current, *self._undo_stack, *self._redo_stack]
        reachable: set[int] = set()
        pending = [page_id for page_id in roots if page_id is not None]
        while pending:
            page_id = pending.pop()
            if page_id in reachable:
                continue
            reachable.add(page_id)
            for links in (self._prev, self._next):
                linked = links.get(page_id)
                if linked is not None and linked not in reachable:
                    pending.append(linked)

        dropped = [page_id for page_id in self._pages if page_id not in reachable]
        for page_id in dropped:
            del self._pages[page_id]
            self._prev.pop(page_id, None)
            self._next.pop(page_id, None)
        if dropped:
            logger.debug("Pruned %d unreachable page(s)", len(dropped))
