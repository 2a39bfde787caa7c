"""Rebuild an outline tree from indented entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from bkmview.exceptions import EmptyOutlineError
from bkmview.schemas import OutlineNode

logger = logging.getLogger(__name__)


@dataclass
class IndentedEntry:
    """A parsed node paired with its indent level (parse-time only)."""

    node: OutlineNode
    indent: int


def build_outline_tree(entries: Sequence[IndentedEntry]) -> list[OutlineNode]:
    """Link entries into a forest according to their indent levels.

    Each entry is compared with the one before it:

    - same indent: it follows the previous entry as a sibling;
    - deeper indent (by any amount): it becomes the previous entry's child;
    - shallower indent: it follows, as a sibling, the most recent earlier
      entry with exactly the same indent. When there is none it is appended
      to the top level.

    The first entry is always top level, whatever its indent.

    Args:
        entries: Parsed entries in file order.

    Returns:
        Top-level nodes, in order.

    Raises:
        EmptyOutlineError: If entries is empty.
    """
    if not entries:
        raise EmptyOutlineError("Bookmarks document has no entries")

    top_level: list[OutlineNode] = [entries[0].node]
    # sibling list that the most recent entry of each indent was appended to
    siblings_at: dict[int, list[OutlineNode]] = {entries[0].indent: top_level}

    for prev, curr in zip(entries, entries[1:]):
        if curr.indent > prev.indent:
            siblings = prev.node.children
        elif curr.indent == prev.indent:
            siblings = siblings_at[prev.indent]
        elif curr.indent in siblings_at:
            siblings = siblings_at[curr.indent]
        else:
            logger.debug(
                "No earlier entry at indent %d for %r, adding it to the top level",
                curr.indent,
                curr.node.title,
            )
            siblings = top_level
        siblings.append(curr.node)
        siblings_at[curr.indent] = siblings

    return top_level
