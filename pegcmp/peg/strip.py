"""Canonical form of rule bodies."""

from __future__ import annotations

import re
from typing import Iterable

from pegcmp.constants import COMMENT_MARKER, LINE_BREAK
from pegcmp.errors import UnterminatedCommentError

_HORIZONTAL_SPACE = " \t"
_LINE_BREAK_RE = re.compile(LINE_BREAK)


def strip(text: str) -> str:
    """Remove comments and leading and trailing white space.

    A comment runs from the marker through the next line break (CRLF, LF or
    a lone CR), inclusive. Everything else, including white space between
    tokens, is kept as is.
    """
    if COMMENT_MARKER not in text:
        return text.strip()

    parts: list[str] = []
    position = 0
    while True:
        start = text.find(COMMENT_MARKER, position)
        if start < 0:
            parts.append(text[position:])
            break
        line_break = _LINE_BREAK_RE.search(text, start)
        if line_break is None:
            raise UnterminatedCommentError(start)
        parts.append(text[position:start])
        position = line_break.end()
    return "".join(parts).strip()


def remove_spans(text: str, spans: Iterable[tuple[int, int]]) -> str:
    """Cut ``[start, end)`` spans out of ``text`` along with their padding.

    A span opening its line takes the line's indentation and one following
    end of line with it; any other span takes the spaces before it.
    """
    parts: list[str] = []
    position = 0
    for start, end in sorted(spans):
        cut = start
        while cut > position and text[cut - 1] in _HORIZONTAL_SPACE:
            cut -= 1
        opens_line = cut == 0 or text[cut - 1] in "\r\n"
        if opens_line:
            line_break = _LINE_BREAK_RE.match(text, end)
            if line_break is not None:
                end = line_break.end()
        parts.append(text[position:cut])
        position = end
    parts.append(text[position:])
    return "".join(parts)
