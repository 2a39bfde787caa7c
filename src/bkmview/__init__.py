"""bkmview: read and write alternative bookmark views (.bkm files)."""

from bkmview.exceptions import (
    BkmviewError,
    BookmarkParseError,
    EmptyOutlineError,
    HeaderError,
    InvalidIndentError,
    SerializationError,
)
from bkmview.parser import parse_bookmarks
from bkmview.schemas import (
    BookmarkCollection,
    Destination,
    FontFlag,
    OutlineDocument,
    OutlineNode,
    Rect,
)
from bkmview.serializer import serialize_bookmarks, serialize_document
from bkmview.storage import (
    export_bookmarks_to_file,
    load_alternative_bookmarks,
    parse_bookmarks_file,
)

__all__ = [
    "BkmviewError",
    "BookmarkCollection",
    "BookmarkParseError",
    "Destination",
    "EmptyOutlineError",
    "FontFlag",
    "HeaderError",
    "InvalidIndentError",
    "OutlineDocument",
    "OutlineNode",
    "Rect",
    "SerializationError",
    "export_bookmarks_to_file",
    "load_alternative_bookmarks",
    "parse_bookmarks",
    "parse_bookmarks_file",
    "serialize_bookmarks",
    "serialize_document",
]
