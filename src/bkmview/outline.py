"""Read-only traversal helpers for outline trees."""

from __future__ import annotations

from typing import Iterable, Iterator

from bkmview.schemas import OutlineNode


def walk_outline(nodes: Iterable[OutlineNode], level: int = 0) -> Iterator[tuple[OutlineNode, int]]:
    """Yield (node, level) pairs in depth-first pre-order."""
    for node in nodes:
        yield node, level
        yield from walk_outline(node.children, level + 1)


def max_depth(nodes: Iterable[OutlineNode]) -> int:
    """Number of levels in the tree; 0 for an empty forest."""
    return max((level + 1 for _, level in walk_outline(nodes)), default=0)
