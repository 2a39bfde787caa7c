"""Parse single outline entries of a bookmarks file.

An entry line is:

    <indent>"quoted title" metadata-token*

where the indent is two spaces per nesting level.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from bkmview.colors import ColorParser, parse_color
from bkmview.config import INDENT_WIDTH
from bkmview.exceptions import InvalidIndentError
from bkmview.quoting import parse_quoted_string
from bkmview.schemas import Destination, FontFlag, OutlineNode, Rect
from bkmview.tokens import MetaToken, parse_meta_token, skip_chars

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^\d+$")
_KIND_RE = re.compile(r'^[^\s"]\S*$')
_MAX_COLOR = 0xFFFFFF


def parse_bookmark_line(
    line: str, *, color_parser: ColorParser = parse_color
) -> tuple[OutlineNode, int]:
    """Parse one entry line into a node and its indent level.

    A missing or unterminated title yields a node with an empty title;
    unknown metadata tokens are ignored.

    Args:
        line: The raw line, without line terminator.
        color_parser: Callable returning (value, ok) for a color token.

    Returns:
        Tuple of (node, level) where level 0 is the top level.

    Raises:
        InvalidIndentError: If the number of leading spaces is odd.
    """
    indent, rest = skip_chars(line, " ")
    if indent % INDENT_WIDTH != 0:
        raise InvalidIndentError(f"Odd indentation ({indent} spaces) in line: {line!r}")

    title, rest = parse_quoted_string(rest)
    if title is None:
        logger.debug("Entry without a valid quoted title: %r", line)
        title = ""

    fields = parse_metadata(rest, color_parser=color_parser)
    return OutlineNode(title=title, **fields), indent // INDENT_WIDTH


def parse_metadata(text: str, *, color_parser: ColorParser = parse_color) -> dict[str, Any]:
    """Classify the tokens following a title into OutlineNode field values.

    Args:
        text: Line remainder after the closing quote of the title.
        color_parser: Callable returning (value, ok) for a color token.

    Returns:
        Keyword arguments for OutlineNode, holding only the fields present.
    """
    fields: dict[str, Any] = {}
    dest: dict[str, Any] = {}
    font_flags = 0

    token, rest = parse_meta_token(text)
    while token is not None:
        if token.raw == "font:bold":
            font_flags |= int(FontFlag.BOLD)
        elif token.raw == "font:italic":
            font_flags |= int(FontFlag.ITALIC)
        elif not _apply_token(token, fields, dest, color_parser):
            logger.debug("Ignoring unknown metadata token %r", token.raw)
        token, rest = parse_meta_token(rest)

    if font_flags:
        fields["font_flags"] = font_flags
    if "kind" in dest:
        fields["destination"] = Destination(**dest)
    elif dest:
        logger.debug("Ignoring destination fields without destkind: %s", sorted(dest))
    return fields


def _apply_token(
    token: MetaToken,
    fields: dict[str, Any],
    dest: dict[str, Any],
    color_parser: ColorParser,
) -> bool:
    """Store a recognized token in fields or dest; return False if unknown."""
    color, ok = color_parser(token.raw)
    if ok and 0 <= color <= _MAX_COLOR:
        fields["color"] = color
        return True

    lowered = token.raw.lower()
    if lowered == "open-default":
        fields["is_open_default"] = True
        return True
    if lowered == "open-toggled":
        fields["is_open_toggled"] = True
        return True
    if token.raw == "unchecked":
        fields["is_unchecked"] = True
        return True

    value = token.value
    if value is None:
        return False
    if token.key == "page" and _NUMBER_RE.match(value):
        fields["page_no"] = int(value)
    elif token.key == "destkind" and _KIND_RE.match(value):
        dest["kind"] = value
    elif token.key == "destname":
        dest["name"] = value
    elif token.key == "destvalue":
        dest["value"] = value
    elif token.key == "destpage" and _NUMBER_RE.match(value):
        dest["page_no"] = int(value)
    elif token.key == "destrect":
        rect = _parse_rect(value)
        if rect is None:
            return False
        dest["rect"] = rect
    else:
        return False
    return True


def _parse_rect(value: str) -> Rect | None:
    """Parse ``x,y,dx,dy``."""
    parts = value.split(",")
    if len(parts) != 4:
        return None
    try:
        x, y, dx, dy = (float(part) for part in parts)
    except ValueError:
        return None
    return Rect(x=x, y=y, dx=dx, dy=dy)
