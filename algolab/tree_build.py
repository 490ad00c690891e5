"""Rebuilding a binary tree from its inorder listing together with its
preorder or postorder listing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from algolab.tree import Node


def _index_map(preorder_or_postorder: Sequence[int], inorder: Sequence[int]) -> dict[int, int]:
    if len(preorder_or_postorder) != len(inorder):
        raise ValueError("traversals must have the same length")
    positions = {value: index for index, value in enumerate(inorder)}
    missing = set(preorder_or_postorder) - positions.keys()
    if missing:
        raise ValueError(f"values missing from the inorder listing: {sorted(missing)}")
    return positions


def from_preorder_inorder(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[Node]:
    """Rebuild a tree from its preorder and inorder listings."""
    positions = _index_map(preorder, inorder)
    upcoming = iter(preorder)

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        value = next(upcoming, None)
        if value is None:
            return None
        node = Node(value)
        position = positions[value]
        node.left = build(start, position - 1)
        node.right = build(position + 1, end)
        return node

    return build(0, len(inorder) - 1)


def from_postorder_inorder(postorder: Sequence[int], inorder: Sequence[int]) -> Optional[Node]:
    """Rebuild a tree from its postorder and inorder listings."""
    positions = _index_map(postorder, inorder)
    upcoming = iter(reversed(postorder))

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        value = next(upcoming, None)
        if value is None:
            return None
        node = Node(value)
        position = positions[value]
        node.right = build(position + 1, end)
        node.left = build(start, position - 1)
        return node

    return build(0, len(inorder) - 1)