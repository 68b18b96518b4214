"""Action handler mixins for WaymarkApp."""

from .bookmark_actions import BookmarkActionsMixin
from .navigation_actions import NavigationActionsMixin
from .search_actions import SearchActionsMixin

__all__ = [
    "BookmarkActionsMixin",
    "NavigationActionsMixin",
    "SearchActionsMixin",
]
