#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/utils/text.py
"""Text processing utilities for the tag renderer and word wrapper.

Functions
---------
collapse : Fold runs of whitespace into single spaces
strip_markup : Remove ANSI escape codes and color span markers
visible_length : Count the characters a terminal will actually display

Examples
--------
Whitespace collapsing:

    >>> from html2mark.utils.text import collapse
    >>> collapse("Text\\nwith    whitespaces\\t")
    'Text with whitespaces '
    >>> collapse("  padded  ", strip_leading=True, strip_trailing=True)
    'padded'

"""

from __future__ import annotations

import re

from html2mark.constants import ANSI_SGR_PATTERN, SPAN_MARKER_PATTERN, WHITESPACE_CHARACTERS

_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE_CHARACTERS)}]+")


def collapse(text: str, strip_leading: bool = False, strip_trailing: bool = False) -> str:
    """Collapse every run of whitespace into exactly one space.

    Only ASCII whitespace (space, tab, newline, carriage return, form feed and
    vertical tab) is folded; a non-breaking space survives untouched.

    Parameters
    ----------
    text : str
        Text to collapse
    strip_leading : bool, default False
        Drop the space at the start of the result, if any
    strip_trailing : bool, default False
        Drop the space at the end of the result, if any

    Returns
    -------
    str
        Collapsed text. The function is idempotent for a fixed pair of flags.

    """
    result = _WHITESPACE_RUN.sub(" ", text)
    if strip_leading and result.startswith(" "):
        result = result[1:]
    if strip_trailing and result.endswith(" "):
        result = result[:-1]
    return result


def strip_markup(text: str) -> str:
    """Remove ANSI SGR sequences and color span markers from text."""
    return SPAN_MARKER_PATTERN.sub("", ANSI_SGR_PATTERN.sub("", text))


def visible_length(text: str) -> int:
    """Return the number of Unicode codepoints a terminal would display.

    Parameters
    ----------
    text : str
        Rendered text, possibly containing escape codes or span markers

    Returns
    -------
    int
        Codepoint count with all zero-width markup excluded

    Examples
    --------
        >>> visible_length("\\x1b[00;36mДалеко\\x1b[0m")
        6

    """
    return len(strip_markup(text))


__all__ = [
    "collapse",
    "strip_markup",
    "visible_length",
]
