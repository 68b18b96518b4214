"""Stack storage for undo/redo page history."""

from typing import Iterator


class PageStack:
    """Stack of page ids for undo/redo.

    Entries may be None (the "no page selected" state before the first
    visit), so pop() alone cannot tell an empty stack from a None entry.
    Check is_empty() first.
    """

    def __init__(self) -> None:
        self._stack: list[int | None] = []

    def push(self, page_id: int | None) -> None:
        """Push a page id onto the stack."""
        self._stack.append(page_id)

    def pop(self) -> int | None:
        """Pop and return the most recent page id, or None if empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def clear(self) -> None:
        """Clear all entries."""
        self._stack.clear()

    def is_empty(self) -> bool:
        """Check if the stack is empty."""
        return len(self._stack) == 0

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[int | None]:
        return iter(self._stack)
