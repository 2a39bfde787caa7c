"""Tests for bookmarks document assembly."""

from __future__ import annotations

import pytest

from bkmview.exceptions import EmptyOutlineError, HeaderError, InvalidIndentError
from bkmview.parser import parse_bookmarks


def _titles(nodes) -> list:  # type: ignore[no-untyped-def]
    return [(node.title, _titles(node.children)) for node in nodes]


class TestParseBookmarks:
    """Tests for parse_bookmarks function."""

    def test_parses_sample(self, sample_bkm: str) -> None:
        """Headers, nesting and entry fields are all read."""
        document = parse_bookmarks(sample_bkm)

        assert document.source_path == "/docs/manual.pdf"
        assert document.title == "my view"
        assert document.root.title == "Introduction"
        assert _titles(document.nodes) == [
            ("Introduction", [("Scope", []), ('Audience "you"', [])]),
            ("Reference", [("Index", [])]),
        ]
        reference = document.nodes[1]
        assert reference.destination is not None
        assert reference.destination.name == "ref start"
        assert reference.children[0].is_unchecked

    def test_dedent_with_two_space_indents(self) -> None:
        """Indents [0, 2, 2, 0, 2] give A(B, C) and D(E)."""
        text = 'file: a.pdf\ntitle: t\n"A"\n  "B"\n  "C"\n"D"\n  "E"\n'

        document = parse_bookmarks(text)

        assert _titles(document.nodes) == [
            ("A", [("B", []), ("C", [])]),
            ("D", [("E", [])]),
        ]

    def test_skipped_levels_are_accepted(self) -> None:
        """Indents [0, 2, 6] nest C directly under B."""
        text = 'file: a.pdf\ntitle: t\n"A"\n  "B"\n      "C"\n'

        document = parse_bookmarks(text)

        assert _titles(document.nodes) == [("A", [("B", [("C", [])])])]

    def test_stops_at_first_empty_line(self) -> None:
        """Entries end at the first empty line."""
        text = 'file: a.pdf\ntitle: t\n"A"\n\nfile: b.pdf\ntitle: other\n"B"\n'

        document = parse_bookmarks(text)

        assert _titles(document.nodes) == [("A", [])]

    def test_accepts_crlf_line_endings(self) -> None:
        """Windows line endings are accepted."""
        text = 'file: a.pdf\r\ntitle: t\r\n"A" unchecked\r\n  "B"\r\n\r\n'

        document = parse_bookmarks(text)

        assert document.source_path == "a.pdf"
        assert document.root.is_unchecked
        assert _titles(document.nodes) == [("A", [("B", [])])]

    def test_unknown_tokens_do_not_fail_the_document(self) -> None:
        """An unknown token does not affect the other fields."""
        text = 'file: a.pdf\ntitle: t\n"A" glow:shiny font:italic page:2\n'

        document = parse_bookmarks(text)

        assert document.root.is_italic
        assert document.root.page_no == 2

    @pytest.mark.parametrize(
        "text",
        [
            "",
            '"A"\n',
            'title: t\n"A"\n',
            'fiel: a.pdf\ntitle: t\n"A"\n',
            'file:\ntitle: t\n"A"\n',
            'file: a.pdf\n"A"\n',
            'file: a.pdf\ntitle:\n"A"\n',
            'title: t\nfile: a.pdf\n"A"\n',
        ],
    )
    def test_rejects_bad_headers(self, text: str) -> None:
        """Missing, misspelled, empty or reordered headers fail the document."""
        with pytest.raises(HeaderError):
            parse_bookmarks(text)

    @pytest.mark.parametrize("text", ["file: a.pdf\ntitle: t\n", "file: a.pdf\ntitle: t\n\n\"A\"\n"])
    def test_rejects_document_without_entries(self, text: str) -> None:
        """A document needs at least one entry."""
        with pytest.raises(EmptyOutlineError):
            parse_bookmarks(text)

    def test_odd_indent_fails_whole_document(self) -> None:
        """One badly indented entry fails the whole document."""
        text = 'file: a.pdf\ntitle: t\n"A"\n  "B"\n   "C"\n"D"\n'

        with pytest.raises(InvalidIndentError):
            parse_bookmarks(text)
