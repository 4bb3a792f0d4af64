"""Input position tracking."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from pegcmp.constants import LINE_BREAK
from pegcmp.models import Pos

_LINE_BREAK_RE = re.compile(LINE_BREAK)


@dataclass(frozen=True)
class Cursor:
    """A point in the input.

    ``index`` addresses the decoded text, ``offset`` counts UTF-8 bytes.
    Lines and columns are 1-based; columns count characters. CRLF, LF and a
    lone CR each end a line.
    """

    index: int = 0
    line: int = 1
    col: int = 1
    offset: int = 0
    # Set when the text consumed so far ends in CR, so a following LF
    # completes the same line break.
    after_cr: bool = field(default=False, compare=False, repr=False)

    def advance(self, text: str) -> Cursor:
        """Return the cursor positioned after ``text`` has been consumed."""
        if not text:
            return self
        rest = text[1:] if self.after_cr and text.startswith("\n") else text
        breaks = _LINE_BREAK_RE.findall(rest)
        if breaks:
            line = self.line + len(breaks)
            col = len(rest) - max(rest.rfind("\r"), rest.rfind("\n"))
        else:
            line = self.line
            col = self.col + len(rest)
        return Cursor(
            index=self.index + len(text),
            line=line,
            col=col,
            offset=self.offset + len(text.encode("utf-8")),
            after_cr=text.endswith("\r"),
        )

    def to_pos(self, filename: str) -> Pos:
        return Pos(filename=filename, line=self.line, col=self.col, offset=self.offset)
