#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/colors.py
"""ANSI color overlay.

The tag renderer never writes escape codes itself. In color mode it brackets
each colored span with zero-width marker characters naming the span's
:class:`Paint`; :func:`apply_colors` later walks the marked-up text with a
stack of open spans and turns it into ANSI SGR sequences.

Codes are written lazily: a span that closes right before another opens, or
right before the end of the document, costs nothing, and a code is emitted
only in front of the first visible character that needs it. The whole output
is bracketed by a reset code.
"""

from __future__ import annotations

import enum
import logging
from typing import Sequence

from html2mark.constants import (
    ANSI_RESET,
    COLOR_BLUE,
    COLOR_CYAN,
    COLOR_GREEN,
    COLOR_PURPLE,
    COLOR_WHITE,
    COLOR_YELLOW,
    SPAN_CLOSE,
    SPAN_OPEN_BASE,
)

logger = logging.getLogger(__name__)


class Paint(enum.Enum):
    """Kinds of colored spans."""

    EMPHASIS = 1
    STRONG = 2
    HEADING = 3
    RULE = 4
    LINK = 5
    TARGET = 6
    MARKER = 7

    @property
    def opener(self) -> str:
        return chr(SPAN_OPEN_BASE + self.value)


_PAINT_COLORS: dict[Paint, int] = {
    Paint.EMPHASIS: COLOR_CYAN,
    Paint.STRONG: COLOR_WHITE,
    Paint.HEADING: COLOR_PURPLE,
    Paint.RULE: COLOR_PURPLE,
    Paint.LINK: COLOR_BLUE,
    Paint.TARGET: COLOR_GREEN,
    Paint.MARKER: COLOR_YELLOW,
}

_OPENERS: dict[str, Paint] = {paint.opener: paint for paint in Paint}


def paint(kind: Paint, text: str) -> str:
    """Mark ``text`` as a span of the given kind."""
    return f"{kind.opener}{text}{SPAN_CLOSE}"


def sgr(color: int, bold: bool = False) -> str:
    """Build an SGR sequence such as ``ESC[01;36m``."""
    return f"\x1b[{'01' if bold else '00'};{color}m"


def _strong_color(stack: Sequence[Paint]) -> int:
    # Headings tint everything bold inside them; otherwise the nearest
    # enclosing colored span lends its hue.
    if Paint.HEADING in stack or Paint.RULE in stack:
        return COLOR_PURPLE
    for outer in reversed(stack):
        if outer is not Paint.STRONG:
            return _PAINT_COLORS[outer]
    return COLOR_WHITE


def resolve_style(stack: Sequence[Paint]) -> str | None:
    """Return the SGR code for the innermost open span, or None for plain text.

    Parameters
    ----------
    stack : Sequence[Paint]
        Open spans, outermost first

    Returns
    -------
    str or None
        Escape sequence to be in effect for text at this nesting

    Examples
    --------
        >>> resolve_style([Paint.STRONG, Paint.EMPHASIS]) == sgr(COLOR_CYAN, bold=True)
        True
        >>> resolve_style([Paint.HEADING, Paint.EMPHASIS, Paint.STRONG]) == sgr(COLOR_PURPLE, bold=True)
        True

    """
    if not stack:
        return None
    innermost = stack[-1]
    bold = Paint.STRONG in stack
    color = _strong_color(stack) if innermost is Paint.STRONG else _PAINT_COLORS[innermost]
    return sgr(color, bold)


def apply_colors(text: str) -> str:
    """Replace span markers with ANSI escape sequences.

    Parameters
    ----------
    text : str
        Rendered document containing span markers

    Returns
    -------
    str
        Document with SGR codes, starting and ending with a reset

    """
    output = [ANSI_RESET]
    stack: list[Paint] = []
    emitted: str | None = None

    for char in text:
        opened = _OPENERS.get(char)
        if opened is not None:
            stack.append(opened)
            continue
        if char == SPAN_CLOSE:
            if stack:
                stack.pop()
            else:
                logger.debug("Ignoring unbalanced color span close marker")
            continue

        desired = resolve_style(stack)
        if desired != emitted:
            output.append(desired or ANSI_RESET)
            emitted = desired
        output.append(char)

    output.append(ANSI_RESET)
    return "".join(output)


__all__ = ["Paint", "paint", "sgr", "resolve_style", "apply_colors"]
