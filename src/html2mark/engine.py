#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/engine.py
"""Tag-stack engine: the core of the HTML to Markdown conversion.

The engine reads the markup tag by tag and keeps an explicit stack of open
:class:`~html2mark.renderer.Frame` records. The bottom of the stack is a
permanent root frame standing for "no enclosing tag". A frame is pushed for
every opening tag, receives the text and rendered children that follow it,
and is collapsed, meaning rendered and folded into the frame below it, when
its scope closes:

- on a matching closing tag, together with every frame above it;
- implicitly, when a new ``<p>`` or ``<li>`` starts while the previous one is
  still open;
- at end of input, when every remaining frame is flushed.

A closing tag with no matching open frame is ignored, and void elements such
as ``<br>``, ``<hr>`` and ``<img>`` are rendered on the spot without pushing a
frame. Because closing is a loop over a flat stack rather than a repair of a
tree, unbalanced markup needs no special handling beyond these rules.

"""

from __future__ import annotations

import logging
import re

from html2mark.constants import SPAN_MARKER_PATTERN
from html2mark.options import ConversionOptions
from html2mark.references import ReferenceRegistry
from html2mark.renderer import Frame, RenderContext, TagRenderer
from html2mark.tags import (
    LIST_KINDS,
    PARAGRAPH_BOUNDARY_KINDS,
    ROOT_TAG,
    VERBATIM_KINDS,
    TagKind,
    classify,
)
from html2mark.tokenizer import TagReader, Token, TokenKind
from html2mark.utils.text import collapse

logger = logging.getLogger(__name__)

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")
_TRAILING_NEWLINES = re.compile(r"\n{2,}\Z")


class TagStackEngine:
    """Convert one HTML document to Markdown.

    An engine instance owns all mutable state of a conversion (the frame
    stack and the reference registry) and must not be shared between
    concurrent calls.

    Parameters
    ----------
    options : ConversionOptions, optional
        Conversion options; defaults are used when omitted

    Examples
    --------
        >>> TagStackEngine().convert("Hello, <i><b>world</i>")
        'Hello, _**world**_'

    """

    def __init__(self, options: ConversionOptions | None = None):
        """Initialize the engine with a fresh stack and registry."""
        self.options = options or ConversionOptions()
        self.registry = ReferenceRegistry()
        self.renderer = TagRenderer(self.options, self.registry)
        self._stack: list[Frame] = [Frame(ROOT_TAG)]

    @property
    def depth(self) -> int:
        """Number of open frames, not counting the root frame."""
        return len(self._stack) - 1

    def convert(self, html: str) -> str:
        """Render a whole document.

        Parameters
        ----------
        html : str
            Markup to convert; need not be well-formed

        Returns
        -------
        str
            Markdown text, still carrying color span markers in color mode

        """
        reader = TagReader(html)
        while True:
            token = reader.advance()
            self.feed_text(reader.content)
            if token is None:
                break
            self.feed_tag(token)
        return self.finish()

    def feed_text(self, text: str) -> None:
        """Append character data to the innermost open frame."""
        if not text:
            return
        frame = self._stack[-1]
        if self.options.colors:
            text = SPAN_MARKER_PATTERN.sub("", text)
        if self._verbatim():
            frame.content += text
            return

        text = collapse(text)
        # Whitespace runs that span tag boundaries still fold into one space
        if frame.content.endswith(("\n", " ")):
            text = text.lstrip(" ")
        frame.content += text

    def feed_tag(self, token: Token) -> None:
        """Apply one tag token to the stack."""
        if token.kind is TokenKind.CLOSE:
            self._close_tag(token.name)
            return

        tag = classify(token.name)
        if tag.is_void:
            # Void elements have no scope: render now, push nothing
            self._append(self.renderer.render(Frame(tag, token.attrs), self._context()))
            return

        if tag.kind is TagKind.PARAGRAPH:
            self._close_implicitly("p", PARAGRAPH_BOUNDARY_KINDS)
        elif tag.kind is TagKind.LIST_ITEM:
            self._close_implicitly("li", LIST_KINDS | {TagKind.ROOT})
        self._stack.append(Frame(tag, token.attrs))

    def finish(self) -> str:
        """Flush every open frame and assemble the final text.

        Returns
        -------
        str
            Rendered document followed by the reference definitions block

        """
        if self.depth:
            logger.debug(f"Closing {self.depth} unclosed tag(s) at end of input")
        self._collapse_to(1)
        result = self.renderer.render(self._stack[0])
        self._stack = [Frame(ROOT_TAG)]

        definitions = self.registry.flush(self.renderer.format_reference_marker)
        if definitions:
            result = result.rstrip(" ") + definitions

        result = _EXCESS_BLANK_LINES.sub("\n\n", result)
        return _TRAILING_NEWLINES.sub("\n", result)

    def _close_tag(self, name: str) -> None:
        index = self._find(name)
        if index is None:
            logger.debug(f"Ignoring stray closing tag </{name}>")
            return
        self._collapse_to(index)

    def _close_implicitly(self, name: str, boundaries: frozenset[TagKind]) -> None:
        index = self._find(name, boundaries)
        if index is not None:
            logger.debug(f"Implicitly closing <{name}> at depth {index}")
            self._collapse_to(index)

    def _find(self, name: str, boundaries: frozenset[TagKind] = frozenset()) -> int | None:
        """Locate the nearest open frame named ``name``, searching downward.

        The search gives up at the first frame whose kind is in
        ``boundaries``. The root frame is never a match.
        """
        for index in range(len(self._stack) - 1, 0, -1):
            frame = self._stack[index]
            if frame.tag.name == name:
                return index
            if frame.tag.kind in boundaries:
                return None
        return None

    def _collapse_to(self, index: int) -> None:
        """Render and fold every frame from the top down to ``index``."""
        while len(self._stack) > max(index, 1):
            frame = self._stack.pop()
            rendered = self.renderer.render(frame, self._context(frame))
            parent = self._stack[-1]
            if frame.tag.kind is TagKind.LIST_ITEM and parent.tag.kind in LIST_KINDS:
                parent.items.append(rendered)
            else:
                self._append(rendered)

    def _context(self, frame: Frame | None = None) -> RenderContext:
        parent = self._stack[-1]
        return RenderContext(
            in_list=frame is not None and parent.tag.kind in LIST_KINDS,
            in_preformatted=any(open_frame.tag.kind is TagKind.PREFORMATTED for open_frame in self._stack),
        )

    def _verbatim(self) -> bool:
        return any(open_frame.tag.kind in VERBATIM_KINDS for open_frame in self._stack)

    def _append(self, rendered: str) -> None:
        frame = self._stack[-1]
        if self._verbatim():
            frame.content += rendered
            return
        # Spaces never dangle at the end of a line or double up across tags
        if rendered.startswith("\n"):
            frame.content = frame.content.rstrip(" ")
        elif frame.content.endswith(" "):
            rendered = rendered.lstrip(" ")
        frame.content += rendered


__all__ = ["TagStackEngine"]
