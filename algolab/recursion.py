"""Recursive counting and backtracking: fences, derangements, subsequences,
permutations and paths through a maze."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_MOVES = (
    ("U", -1, 0),
    ("D", 1, 0),
    ("L", 0, -1),
    ("R", 0, 1),
)


def painting_fence(n: int, k: int) -> int:
    """Count the ways to paint ``n`` posts with ``k`` colours so that no
    more than two adjacent posts share a colour."""
    if n < 1:
        raise ValueError("a fence needs at least one post")
    if n == 1:
        return k
    before, last = k, k + k * (k - 1)
    for _ in range(3, n + 1):
        before, last = last, (k - 1) * (last + before)
    return last


def count_derangements(n: int) -> int:
    """Count the permutations of ``n`` items in which no item keeps its place."""
    if n < 1:
        raise ValueError("derangements need at least one item")
    if n == 1:
        return 0
    before, last = 0, 1
    for size in range(3, n + 1):
        before, last = last, (size - 1) * (last + before)
    return last


def subsequences(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text``, exclusion branch first."""

    def walk(index: int, output: str) -> Iterator[str]:
        if index >= len(text):
            yield output
            return
        yield from walk(index + 1, output)
        yield from walk(index + 1, output + text[index])

    yield from walk(0, "")


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text`` in swap-and-backtrack order."""
    chars = list(text)

    def walk(index: int) -> Iterator[str]:
        if index >= len(chars):
            yield "".join(chars)
            return
        for j in range(index, len(chars)):
            chars[index], chars[j] = chars[j], chars[index]
            yield from walk(index + 1)
            chars[index], chars[j] = chars[j], chars[index]

    yield from walk(0)


def maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell.

    Open cells hold 1. Paths are strings of the moves U, D, L and R, found
    in that order of preference; no cell is visited twice on one path.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        raise ValueError("maze must have at least one cell")
    cols = len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows must all have the same length")

    target = (rows - 1, cols - 1)
    visited = {(0, 0)}
    path: list[str] = []
    found: list[str] = []

    def walk(x: int, y: int) -> None:
        if (x, y) == target:
            found.append("".join(path))
            return
        for letter, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < rows
                and 0 <= ny < cols
                and maze[nx][ny] == 1
                and (nx, ny) not in visited
            ):
                visited.add((nx, ny))
                path.append(letter)
                walk(nx, ny)
                path.pop()
                visited.discard((nx, ny))

    walk(0, 0)
    return found