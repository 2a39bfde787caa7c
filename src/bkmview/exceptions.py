"""Custom exceptions for bkmview."""


class BkmviewError(Exception):
    """Base exception for bkmview operations."""


class BookmarkParseError(BkmviewError):
    """Structural error while parsing a bookmarks file."""


class HeaderError(BookmarkParseError):
    """Missing or malformed ``file:`` / ``title:`` header line."""


class InvalidIndentError(BookmarkParseError):
    """Indentation is not a multiple of two spaces."""


class EmptyOutlineError(BookmarkParseError):
    """Document has headers but no outline entries."""


class SerializationError(BkmviewError):
    """Outline cannot be written in the bookmarks format."""
