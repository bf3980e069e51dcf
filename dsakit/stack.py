"""A fixed-capacity stack and a stack-based string reversal."""

from __future__ import annotations


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list = []

    def push(self, element) -> None:
        """Put ``element`` on top; raises StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(element)

    def pop(self):
        """Remove and return the top element; raises StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self):
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def reverse_string(text: str) -> str:
    """Reverse ``text`` by pushing every character onto a stack and popping them off."""
    stack = list(text)
    chars = []
    while stack:
        chars.append(stack.pop())
    return "".join(chars)