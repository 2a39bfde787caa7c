"""Line and token primitives for the bookmarks format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from bkmview.quoting import parse_quoted_string


@dataclass(frozen=True)
class MetaToken:
    """A metadata token following an entry's title.

    Attributes:
        raw: Token text exactly as written (used for literal matches).
        key: Text before the first ":" (the whole token when there is none).
        value: Text after the first ":", unquoted when written as
            ``key:"quoted value"``; None when the token has no ":".
    """

    raw: str
    key: str
    value: str | None


def skip_chars(text: str, char: str) -> tuple[int, str]:
    """Skip leading occurrences of char; return (count, rest)."""
    rest = text.lstrip(char)
    return len(text) - len(rest), rest


def parse_until(text: str, sep: str) -> tuple[str, str]:
    """Split text at the first sep; return (part, rest) with sep consumed."""
    part, _, rest = text.partition(sep)
    return part, rest


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines of text split on newlines, without line terminators."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line.removesuffix("\r")


def parse_kv(line: str, key: str) -> str:
    """Parse a ``key: value`` header line.

    Returns:
        The trimmed value, or an empty string if the key does not match,
        the ":" is missing, or the value is empty.
    """
    _, rest = skip_chars(line, " ")
    end = 0
    while end < len(rest) and rest[end] not in ": ":
        end += 1
    if rest[:end] != key:
        return ""
    _, rest = skip_chars(rest[end:], " ")
    if not rest.startswith(":"):
        return ""
    return rest[1:].strip()


def parse_meta_token(text: str) -> tuple[MetaToken | None, str]:
    """Read the next space-separated metadata token.

    A token may be ``key``, ``key:value`` or ``key:"quoted value"``; only
    the quoted form may contain spaces.

    Returns:
        Tuple of (token, rest). token is None once text holds nothing but
        spaces.
    """
    _, text = skip_chars(text, " ")
    if not text:
        return None, ""

    key_end = 0
    while key_end < len(text) and text[key_end] not in ": ":
        key_end += 1
    key = text[:key_end]
    if key_end >= len(text) or text[key_end] == " ":
        return MetaToken(raw=key, key=key, value=None), text[key_end:]

    after_colon = text[key_end + 1 :]
    if after_colon.startswith('"'):
        value, rest = parse_quoted_string(after_colon)
        if value is not None:
            raw = text[: len(text) - len(rest)]
            return MetaToken(raw=raw, key=key, value=value), rest

    raw, rest = parse_until(text, " ")
    return MetaToken(raw=raw, key=key, value=raw[key_end + 1 :]), rest
