"""Local configuration for bkmview."""

from __future__ import annotations

import os


DEFAULT_FILE_SUFFIX = ".bkm"
DEFAULT_VIEW_TITLE = "default view"
DEFAULT_ENCODING = "utf-8"

# Two spaces per nesting level; not configurable, files depend on it.
INDENT_WIDTH = 2

BKMVIEW_FILE_SUFFIX = os.getenv("BKMVIEW_FILE_SUFFIX", DEFAULT_FILE_SUFFIX)
BKMVIEW_DEFAULT_VIEW_TITLE = os.getenv("BKMVIEW_DEFAULT_VIEW_TITLE", DEFAULT_VIEW_TITLE)
BKMVIEW_ENCODING = os.getenv("BKMVIEW_ENCODING", DEFAULT_ENCODING)
# Write "open-toggled" whenever "open-default" is set, as older writers did.
BKMVIEW_LEGACY_OPEN_TOGGLED = os.getenv("BKMVIEW_LEGACY_OPEN_TOGGLED", "0").lower() in ("1", "true", "yes")
