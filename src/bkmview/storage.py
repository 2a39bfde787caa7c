"""Load and save ``.bkm`` sidecar files.

Failures in this module are reported as return values (``None`` / ``False``)
and logged; nothing here raises for a missing file or a malformed document.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

from bkmview.colors import ColorParser, parse_color
from bkmview.config import BKMVIEW_ENCODING, BKMVIEW_FILE_SUFFIX
from bkmview.exceptions import BkmviewError
from bkmview.parser import parse_bookmarks
from bkmview.schemas import BookmarkCollection, OutlineDocument
from bkmview.serializer import serialize_bookmarks

logger = logging.getLogger(__name__)

StrPath = Union[str, "PathLike[str]"]


def read_bytes(path: StrPath) -> bytes | None:
    """Read a whole file, or return None if it cannot be read."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None


def write_bytes(path: StrPath, data: bytes) -> bool:
    """Write data to path, replacing its contents. Returns success."""
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        logger.error("Cannot write %s: %s", path, exc)
        return False
    return True


def bookmarks_path_for(base_file_name: StrPath) -> Path:
    """Return the sidecar path for a document (``doc.pdf`` -> ``doc.pdf.bkm``)."""
    return Path(f"{base_file_name}{BKMVIEW_FILE_SUFFIX}")


def parse_bookmarks_file(
    path: StrPath, *, color_parser: ColorParser = parse_color
) -> BookmarkCollection | None:
    """Read and parse a bookmarks file.

    Only the first document of the file is read.

    Args:
        path: Path of the ``.bkm`` file.
        color_parser: Callable returning (value, ok) for a color token.

    Returns:
        A collection holding the parsed document, or None if the file cannot
        be read or is malformed.
    """
    data = read_bytes(path)
    if data is None:
        return None
    text = data.decode(BKMVIEW_ENCODING, errors="replace")
    try:
        document = parse_bookmarks(text, color_parser=color_parser)
    except BkmviewError as exc:
        logger.warning("Invalid bookmarks file %s: %s", path, exc)
        return None
    return BookmarkCollection(documents=[document])


def load_alternative_bookmarks(
    base_file_name: StrPath, *, color_parser: ColorParser = parse_color
) -> BookmarkCollection | None:
    """Load the bookmarks sidecar file stored next to a document.

    Args:
        base_file_name: Path of the document the bookmarks belong to.
        color_parser: Callable returning (value, ok) for a color token.

    Returns:
        The loaded collection, or None if there is no valid sidecar file.
    """
    return parse_bookmarks_file(bookmarks_path_for(base_file_name), color_parser=color_parser)


def export_bookmarks_to_file(
    bookmarks: BookmarkCollection | Iterable[OutlineDocument],
    bkm_path: StrPath,
    *,
    legacy_open_toggled: bool | None = None,
) -> bool:
    """Serialize bookmarks and write them to bkm_path.

    Returns:
        True if the file was written, False if serialization or the write
        failed.
    """
    try:
        text = serialize_bookmarks(bookmarks, legacy_open_toggled=legacy_open_toggled)
    except BkmviewError as exc:
        logger.error("Cannot serialize bookmarks for %s: %s", bkm_path, exc)
        return False
    return write_bytes(bkm_path, text.encode(BKMVIEW_ENCODING))
