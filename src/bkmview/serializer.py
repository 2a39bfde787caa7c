"""Serialize outline trees into the bookmarks text format."""

from __future__ import annotations

from typing import Iterable

from bkmview.colors import format_color
from bkmview.config import BKMVIEW_DEFAULT_VIEW_TITLE, BKMVIEW_LEGACY_OPEN_TOGGLED, INDENT_WIDTH
from bkmview.exceptions import SerializationError
from bkmview.outline import walk_outline
from bkmview.quoting import quote_string
from bkmview.schemas import BookmarkCollection, Destination, OutlineDocument, OutlineNode


def serialize_bookmarks(
    bookmarks: BookmarkCollection | Iterable[OutlineDocument],
    *,
    legacy_open_toggled: bool | None = None,
) -> str:
    """Serialize every document of a collection, one after another."""
    documents = bookmarks.documents if isinstance(bookmarks, BookmarkCollection) else bookmarks
    return "".join(
        serialize_document(document, legacy_open_toggled=legacy_open_toggled)
        for document in documents
    )


def serialize_document(document: OutlineDocument, *, legacy_open_toggled: bool | None = None) -> str:
    """Serialize one document, terminated by an empty line.

    The ``title:`` header is always written as the default view title, not
    the document's own title.

    Raises:
        SerializationError: If the source path is empty, has surrounding
            whitespace or a line break, or any node cannot be written.
    """
    path = document.source_path
    _check_single_line(path, "file path")
    if not path or path != path.strip():
        raise SerializationError(f"Cannot write empty or padded file path: {path!r}")
    lines = [f"file: {path}", f"title: {BKMVIEW_DEFAULT_VIEW_TITLE}"]
    lines.extend(serialize_outline(document.nodes, legacy_open_toggled=legacy_open_toggled))
    return "\n".join(lines) + "\n\n"


def serialize_outline(
    nodes: Iterable[OutlineNode],
    level: int = 0,
    *,
    legacy_open_toggled: bool | None = None,
) -> list[str]:
    """Render nodes depth-first, one line per node.

    Args:
        nodes: Sibling nodes to render.
        level: Indent level of nodes.
        legacy_open_toggled: Write ``open-toggled`` whenever ``open-default``
            is set instead of from the node's own flag. Defaults to
            BKMVIEW_LEGACY_OPEN_TOGGLED.

    Returns:
        Lines without terminators.

    Raises:
        SerializationError: If a node's page disagrees with its destination
            or a string field contains a line break.
    """
    if legacy_open_toggled is None:
        legacy_open_toggled = BKMVIEW_LEGACY_OPEN_TOGGLED

    return [
        " " * (INDENT_WIDTH * node_level) + _serialize_node(node, legacy_open_toggled)
        for node, node_level in walk_outline(nodes, level)
    ]


def _serialize_node(node: OutlineNode, legacy_open_toggled: bool) -> str:
    if not node.page_numbers_match():
        raise SerializationError(
            f"Entry {node.title!r} has page {node.page_no} but its destination "
            f"points to page {node.destination.page_no}"  # type: ignore[union-attr]
        )

    _check_single_line(node.title, "title")
    parts = [quote_string(node.title)]
    if node.is_italic:
        parts.append("font:italic")
    if node.is_bold:
        parts.append("font:bold")
    if node.color is not None:
        parts.append(format_color(node.color))
    if node.page_no != 0:
        parts.append(f"page:{node.page_no}")
    if node.is_open_default:
        parts.append("open-default")
    open_toggled = node.is_open_default if legacy_open_toggled else node.is_open_toggled
    if open_toggled:
        parts.append("open-toggled")
    if node.is_unchecked:
        parts.append("unchecked")
    if node.destination is not None:
        parts.extend(_serialize_destination(node.destination))
    return " ".join(parts)


def _serialize_destination(dest: Destination) -> list[str]:
    parts = [f"destkind:{dest.kind}"]
    if dest.name is not None:
        _check_single_line(dest.name, "destination name")
        parts.append(f"destname:{quote_string(dest.name)}")
    if dest.value is not None:
        _check_single_line(dest.value, "destination value")
        parts.append(f"destvalue:{quote_string(dest.value)}")
    if dest.page_no > 0:
        parts.append(f"destpage:{dest.page_no}")
    rect = dest.rect
    if rect is not None and not rect.is_empty:
        parts.append(f"destrect:{rect.x!r},{rect.y!r},{rect.dx!r},{rect.dy!r}")
    return parts


def _check_single_line(value: str, what: str) -> None:
    if "\n" in value or "\r" in value:
        raise SerializationError(f"Cannot write {what} containing a line break: {value!r}")
