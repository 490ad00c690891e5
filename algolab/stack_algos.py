"""Stack exercises: redundant brackets, reversing and sorting a stack,
finding its middle element, and the next smaller value to the right.

Stacks are plain lists with the bottom at index 0 and the top at the end.
"""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Iterable, Sequence
from typing import Any

_OPERATORS = frozenset("+-*/")


def has_redundant_brackets(expression: str) -> bool:
    """Tell whether ``expression`` holds a bracket pair enclosing no operator."""
    pending: list[str] = []
    for ch in expression:
        if ch == "(" or ch in _OPERATORS:
            pending.append(ch)
        elif ch == ")":
            operators = 0
            while pending and pending[-1] != "(":
                if pending.pop() in _OPERATORS:
                    operators += 1
            if not pending:
                raise ValueError("closing bracket without a matching opening bracket")
            pending.pop()
            if operators == 0:
                return True
    return False


def insert_at_bottom(stack: Sequence[Any], element: Any) -> list[Any]:
    """Return a new stack with ``element`` placed beneath every other item."""
    return [element, *stack]


def reverse_stack(stack: Sequence[Any]) -> list[Any]:
    """Return a new stack whose top is the old bottom."""
    reversed_stack: list[Any] = []
    for item in stack:
        reversed_stack = insert_at_bottom(reversed_stack, item)
    return reversed_stack


def insert_sorted(stack: Sequence[Any], element: Any) -> list[Any]:
    """Return a new sorted stack with ``element`` added.

    ``stack`` must already be sorted with its largest item on top; the new
    element goes above every item that is not greater than it.
    """
    result = list(stack)
    insort_right(result, element)
    return result


def sort_stack(stack: Iterable[Any]) -> list[Any]:
    """Return a new stack holding the items sorted, the largest on top."""
    result: list[Any] = []
    for item in stack:
        result = insert_sorted(result, item)
    return result


def middle_element(stack: Sequence[Any]) -> Any:
    """Return the middle item of ``stack``.

    Counting from the top, this is position ``size // 2 + 1`` for an odd
    size and ``size // 2`` for an even one.
    """
    size = len(stack)
    if size == 0:
        raise IndexError("middle element of an empty stack")
    position = size // 2 + 1 if size % 2 else size // 2
    return stack[size - position]


def next_smaller(values: Sequence[int]) -> list[int]:
    """For each value, return the nearest value to its right that is not
    greater than it, or -1 where there is none."""
    result = [-1] * len(values)
    candidates: list[int] = []
    for index in reversed(range(len(values))):
        current = values[index]
        while candidates and candidates[-1] > current:
            candidates.pop()
        if candidates:
            result[index] = candidates[-1]
        candidates.append(current)
    return result