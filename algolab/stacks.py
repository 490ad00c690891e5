"""Fixed-capacity stacks: a single bounded stack and two stacks sharing one array."""

from __future__ import annotations

from collections.abc import Iterator


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` integers."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))


class TwoStacks:
    """Two stacks sharing one array of ``size`` slots.

    The first stack grows from the front, the second from the back; empty
    slots hold 0.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._slots = [0] * size
        self._top1 = -1
        self._top2 = size

    def _check_room(self) -> None:
        if self._top2 - self._top1 <= 1:
            raise StackOverflowError("both stacks together fill the array")

    def push1(self, value: int) -> None:
        """Push ``value`` onto the first stack."""
        self._check_room()
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: int) -> None:
        """Push ``value`` onto the second stack."""
        self._check_room()
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> int:
        """Remove and return the top of the first stack."""
        if self._top1 == -1:
            raise StackUnderflowError("first stack is empty")
        value = self._slots[self._top1]
        self._slots[self._top1] = 0
        self._top1 -= 1
        return value

    def pop2(self) -> int:
        """Remove and return the top of the second stack."""
        if self._top2 == self.size:
            raise StackUnderflowError("second stack is empty")
        value = self._slots[self._top2]
        self._slots[self._top2] = 0
        self._top2 += 1
        return value

    def snapshot(self) -> list[int]:
        """Return a copy of the shared array."""
        return list(self._slots)