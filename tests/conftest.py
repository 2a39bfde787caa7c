"""Test setup for bkmview."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SAMPLE_BKM = (
    "file: /docs/manual.pdf\n"
    "title: my view\n"
    '"Introduction" font:bold page:1 open-default\n'
    '  "Scope" page:2\n'
    '  "Audience \\"you\\"" font:italic color:#ff0000 page:3\n'
    '"Reference" page:10 destkind:scrollto destname:"ref start" destpage:10 destrect:0.0,72.5,595.0,20.0\n'
    '  "Index" unchecked\n'
    "\n"
)


@pytest.fixture
def sample_bkm() -> str:
    """A small, well-formed bookmarks file."""
    return SAMPLE_BKM
