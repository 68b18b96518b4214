"""Tests for waymark.navigation module."""

from waymark.navigation import PageStack


class TestPageStack:
    def test_new_stack_is_empty(self):
        stack = PageStack()
        assert stack.is_empty()
        assert len(stack) == 0

    def test_push_pop_is_lifo(self):
        stack = PageStack()
        stack.push(1)
        stack.push(2)
        assert stack.pop() == 2
        assert stack.pop() == 1
        assert stack.is_empty()

    def test_pop_empty_returns_none(self):
        assert PageStack().pop() is None

    def test_none_is_a_valid_entry(self):
        stack = PageStack()
        stack.push(None)
        assert not stack.is_empty()
        assert stack.pop() is None
        assert stack.is_empty()

    def test_iterates_bottom_to_top(self):
        stack = PageStack()
        for page_id in (None, 0, 1):
            stack.push(page_id)
        assert list(stack) == [None, 0, 1]

    def test_clear(self):
        stack = PageStack()
        stack.push(1)
        stack.push(2)
        stack.clear()
        assert stack.is_empty()
