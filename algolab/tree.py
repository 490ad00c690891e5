"""Binary trees: building from a preorder listing, depth-first and level
traversals, side views, top and bottom views and the boundary walk."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from values listed in preorder, -1 standing for no node.

    Each node's value is followed by its left subtree and then its right
    subtree. Raises ValueError if the values run out before the tree closes.
    """
    stream = iter(values)

    def build() -> Optional[Node]:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("values ended before the tree was complete") from None
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _preorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield node.data
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.data
    yield from _inorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.data


def preorder(root: Optional[Node]) -> list[int]:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def postorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, right, node order."""
    return list(_postorder(root))


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Return the values level by level, each level from left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _side_view(root: Optional[Node], from_left: bool) -> list[int]:
    view: list[int] = []

    def walk(node: Optional[Node], level: int) -> None:
        if node is None:
            return
        if level == len(view):
            view.append(node.data)
        first, second = (node.left, node.right) if from_left else (node.right, node.left)
        walk(first, level + 1)
        walk(second, level + 1)

    walk(root, 0)
    return view


def left_view(root: Optional[Node]) -> list[int]:
    """Return the first node seen on each level from the left."""
    return _side_view(root, from_left=True)


def right_view(root: Optional[Node]) -> list[int]:
    """Return the first node seen on each level from the right."""
    return _side_view(root, from_left=False)


def _by_horizontal_distance(root: Optional[Node]) -> Iterator[tuple[int, int]]:
    """Yield (horizontal distance, value) pairs in breadth-first order."""
    if root is None:
        return
    queue: deque[tuple[Node, int]] = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        yield distance, node.data
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))


def top_view(root: Optional[Node]) -> list[int]:
    """Return the nodes seen from above, ordered from left to right."""
    seen: dict[int, int] = {}
    for distance, value in _by_horizontal_distance(root):
        seen.setdefault(distance, value)
    return [seen[distance] for distance in sorted(seen)]


def bottom_view(root: Optional[Node]) -> list[int]:
    """Return the nodes seen from below, ordered from left to right."""
    seen: dict[int, int] = {}
    for distance, value in _by_horizontal_distance(root):
        seen[distance] = value
    return [seen[distance] for distance in sorted(seen)]


def _left_boundary(node: Optional[Node]) -> Iterator[int]:
    while node is not None and not node.is_leaf:
        yield node.data
        node = node.left if node.left is not None else node.right


def _leaves(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    if node.is_leaf:
        yield node.data
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def _right_boundary(node: Optional[Node]) -> list[int]:
    path: list[int] = []
    while node is not None and not node.is_leaf:
        path.append(node.data)
        node = node.right if node.right is not None else node.left
    path.reverse()
    return path


def boundary_traversal(root: Optional[Node]) -> list[int]:
    """Return the left boundary top-down, the leaves left to right, then the
    right boundary bottom-up.

    The right boundary starts from the root's right child, or from its left
    child when there is no right one.
    """
    if root is None:
        return []
    result = list(_left_boundary(root))
    result.extend(_leaves(root))
    start = root.right if root.right is not None else root.left
    result.extend(_right_boundary(start))
    return result