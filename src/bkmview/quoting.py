"""Quoted string literals used for titles and destination names."""

from __future__ import annotations

_QUOTE = '"'
_ESCAPE = "\\"


def parse_quoted_string(text: str) -> tuple[str | None, str]:
    """Decode a double-quoted, backslash-escaped literal at the start of text.

    ``\\\\`` and ``\\"`` are unescaped; a backslash before any other character
    is kept as-is.

    Args:
        text: Line remainder starting with the opening quote.

    Returns:
        Tuple of (decoded, rest) where rest is the text after the closing
        quote. On failure (no opening quote, no closing quote) decoded is
        None and rest is the unmodified input.
    """
    n = len(text)
    # shortest literal is ""
    if n < 2 or text[0] != _QUOTE:
        return None, text

    chars: list[str] = []
    i = 1
    while i < n:
        c = text[i]
        if c == _QUOTE:
            return "".join(chars), text[i + 1 :]
        if c != _ESCAPE:
            chars.append(c)
            i += 1
            continue
        i += 1
        if i >= n:
            break
        escaped = text[i]
        if escaped in (_ESCAPE, _QUOTE):
            chars.append(escaped)
            i += 1
        else:
            chars.append(c)
    return None, text


def quote_string(value: str) -> str:
    """Encode value as a double-quoted literal readable by parse_quoted_string."""
    escaped = value.replace(_ESCAPE, _ESCAPE * 2).replace(_QUOTE, _ESCAPE + _QUOTE)
    return f"{_QUOTE}{escaped}{_QUOTE}"
