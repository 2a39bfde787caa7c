"""Assemble a bookmarks document from the text of a ``.bkm`` file."""

from __future__ import annotations

from bkmview.colors import ColorParser, parse_color
from bkmview.exceptions import HeaderError
from bkmview.line_parser import parse_bookmark_line
from bkmview.schemas import OutlineDocument
from bkmview.tokens import iter_lines, parse_kv
from bkmview.tree import IndentedEntry, build_outline_tree


def parse_bookmarks(text: str, *, color_parser: ColorParser = parse_color) -> OutlineDocument:
    """Parse the first bookmarks document in text.

    The document starts with a ``file:`` and a ``title:`` header line,
    followed by one entry per line up to the first empty line or the end of
    the text.

    Args:
        text: Decoded contents of a bookmarks file.
        color_parser: Callable returning (value, ok) for a color token.

    Returns:
        The parsed document.

    Raises:
        HeaderError: If either header line is missing or malformed.
        InvalidIndentError: If an entry has odd indentation.
        EmptyOutlineError: If there are no entries after the headers.
    """
    lines = iter_lines(text)

    source_path = parse_kv(next(lines, ""), "file")
    if not source_path:
        raise HeaderError("Bookmarks document must start with a 'file:' line")
    title = parse_kv(next(lines, ""), "title")
    if not title:
        raise HeaderError("Second line of a bookmarks document must be a 'title:' line")

    entries: list[IndentedEntry] = []
    try:
        for line in lines:
            if not line:
                break
            entries.append(IndentedEntry(*parse_bookmark_line(line, color_parser=color_parser)))
        nodes = build_outline_tree(entries)
    finally:
        # drop parsed nodes on every exit path, including failures
        entries.clear()

    return OutlineDocument(source_path=source_path, title=title, nodes=nodes)
