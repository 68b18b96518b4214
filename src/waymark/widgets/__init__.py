"""Waymark widgets."""

from .banner import Banner
from .bookmarks import BookmarksModal
from .history_list import HistoryList
from .search_bar import SearchBar
from .url_bar import UrlBar

__all__ = [
    "Banner",
    "BookmarksModal",
    "HistoryList",
    "SearchBar",
    "UrlBar",
]
