#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/wrap.py
"""Hard word wrapping for rendered Markdown.

:func:`wrap_text` re-flows each line of the rendered document to a column
width. Existing newlines are hard breaks and are never merged. Widths are
measured in visible Unicode codepoints: ANSI escape sequences count as zero
columns and a tab counts as :data:`~html2mark.constants.DEFAULT_TAB_WIDTH`
columns. Lines break at spaces; a word wider than the column is split at
the column boundary.

When color codes are present, each line is made self-contained: a line
break inside an active color is preceded by a reset and the active code is
written again before the next visible character. A pager showing any single
line therefore still shows it in the right color.
"""

from __future__ import annotations

import re

from html2mark.constants import ANSI_RESET, ANSI_SGR_PATTERN, DEFAULT_TAB_WIDTH

_SPACE_RUN = re.compile(r"( +)")
_SEGMENT = re.compile(rf"({ANSI_SGR_PATTERN.pattern})|(.)", re.DOTALL)


class _Wrapper:
    """Streaming state of one wrapping pass."""

    def __init__(self, width: int, tab_width: int):
        self.width = width
        self.tab_width = tab_width
        self.output: list[str] = []
        self.column = 0
        # Escape code currently in effect according to the source text
        self.active: str | None = None
        # Code to write again before the next visible character of a new line
        self.pending: str | None = None

    def char_width(self, char: str) -> int:
        return self.tab_width if char == "\t" else 1

    def word_width(self, word: str) -> int:
        return sum(self.char_width(char) for char in ANSI_SGR_PATTERN.sub("", word))

    def line_break(self) -> None:
        if self.active and self.pending is None:
            self.output.append(ANSI_RESET)
            self.pending = self.active
        self.output.append("\n")
        self.column = 0

    def emit_code(self, code: str) -> None:
        self.output.append(code)
        self.active = None if code == ANSI_RESET else code
        self.pending = None

    def emit_visible(self, text: str) -> None:
        if self.pending is not None:
            self.output.append(self.pending)
            self.pending = None
        self.output.append(text)
        self.column += sum(self.char_width(char) for char in text)

    def emit_word(self, word: str, split: bool) -> None:
        for match in _SEGMENT.finditer(word):
            code, char = match.groups()
            if code:
                self.emit_code(code)
                continue
            if split and self.column and self.column + self.char_width(char) > self.width:
                self.line_break()
            self.emit_visible(char)

    def place(self, gap: str, word: str) -> None:
        """Put one word (and the spaces before it) on the current line."""
        needed = self.word_width(word)
        if self.column + len(gap) + needed <= self.width:
            if gap:
                self.emit_visible(gap)
            self.emit_word(word, split=False)
            return
        if self.column:
            self.line_break()
        self.emit_word(word, split=needed > self.width)

    def wrap_line(self, line: str) -> None:
        parts = _SPACE_RUN.split(line)
        gap = ""
        for position, part in enumerate(parts):
            if position % 2:
                gap = part
            elif part:
                self.place(gap, part)
                gap = ""
        # Trailing spaces are kept only while they still fit
        if gap and self.column + len(gap) <= self.width:
            self.emit_visible(gap)


def wrap_text(text: str, width: int, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Hard-wrap rendered text to ``width`` visible columns.

    Parameters
    ----------
    text : str
        Rendered document, possibly containing ANSI SGR sequences
    width : int
        Maximum number of visible columns per line
    tab_width : int, default 8
        Columns counted for a tab character

    Returns
    -------
    str
        Wrapped text

    Examples
    --------
        >>> wrap_text("Loremipsumdolorsitamet, consecteturadipisicing elit", 20)
        'Loremipsumdolorsitam\\net,\\nconsecteturadipisici\\nng elit'

    """
    wrapper = _Wrapper(width, tab_width)
    for index, line in enumerate(text.split("\n")):
        if index:
            wrapper.line_break()
        wrapper.wrap_line(line)
    return "".join(wrapper.output)


__all__ = ["wrap_text"]
