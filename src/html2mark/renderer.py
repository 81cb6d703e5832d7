#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/renderer.py
"""Per-tag Markdown rendering.

The :class:`TagRenderer` turns one closed frame, meaning a tag together with
the already rendered content of everything nested inside it, into its Markdown
equivalent. It is called by the tag-stack engine each time a frame is
collapsed, innermost first, so every handler sees finished child output and
only has to add its own markers, framing and indentation.

In color mode the handlers mark colored spans with :func:`html2mark.colors.paint`
instead of emitting Markdown emphasis markers; resolving those spans into
escape codes is left to the color overlay.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from html2mark.colors import Paint, paint
from html2mark.constants import BULLET_INDENT, BULLET_MARKER, QUOTE_MARKER, THEMATIC_BREAK
from html2mark.options import ConversionOptions
from html2mark.references import ReferenceRegistry
from html2mark.tags import Tag, TagKind
from html2mark.utils.text import collapse, visible_length

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """One open tag and the text accumulated inside it so far.

    Parameters
    ----------
    tag : Tag
        Classified tag
    attrs : dict[str, str]
        Attributes of the opening tag
    content : str, default ""
        Rendered content of children and text seen so far
    items : list[str]
        Rendered list items, used by ``ol`` and ``ul`` frames only

    """

    tag: Tag
    attrs: dict[str, str] = field(default_factory=dict)
    content: str = ""
    items: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RenderContext:
    """Facts about a frame's surroundings that influence its rendering.

    Parameters
    ----------
    in_list : bool, default False
        The frame's parent is an ``ol`` or ``ul``
    in_preformatted : bool, default False
        A ``pre`` frame encloses this one

    """

    in_list: bool = False
    in_preformatted: bool = False


class TagRenderer:
    """Render closed frames to Markdown.

    Parameters
    ----------
    options : ConversionOptions
        Conversion options for the current call
    registry : ReferenceRegistry
        Registry receiving reference-style links of the current call

    Examples
    --------
        >>> from html2mark.tags import classify
        >>> renderer = TagRenderer(ConversionOptions(), ReferenceRegistry())
        >>> renderer.render(Frame(classify("b"), content="Text"))
        '**Text**'

    """

    def __init__(self, options: ConversionOptions, registry: ReferenceRegistry):
        """Initialize the renderer with options and the call's registry."""
        self.options = options
        self.registry = registry
        self._handlers: dict[TagKind, Callable[[Frame, RenderContext], str]] = {
            TagKind.ROOT: self._render_passthrough,
            TagKind.SPAN: self._render_passthrough,
            TagKind.DOCUMENT: self._render_document,
            TagKind.DISCARDED: self._render_discarded,
            TagKind.PARAGRAPH: self._render_paragraph,
            TagKind.BLOCK: self._render_block,
            TagKind.EMPHASIS: self._render_emphasis,
            TagKind.STRONG: self._render_strong,
            TagKind.STRIKE: self._render_strike,
            TagKind.CODE: self._render_code,
            TagKind.HEADING: self._render_heading,
            TagKind.RULE: self._render_rule,
            TagKind.BREAK: self._render_break,
            TagKind.LINK: self._render_link,
            TagKind.IMAGE: self._render_image,
            TagKind.PREFORMATTED: self._render_preformatted,
            TagKind.ORDERED_LIST: self._render_list,
            TagKind.UNORDERED_LIST: self._render_list,
            TagKind.LIST_ITEM: self._render_list_item,
            TagKind.BLOCKQUOTE: self._render_blockquote,
        }

    def render(self, frame: Frame, context: RenderContext | None = None) -> str:
        """Render a closed frame.

        Parameters
        ----------
        frame : Frame
            Frame whose scope has closed
        context : RenderContext, optional
            Surroundings of the frame; defaults to a top-level context

        Returns
        -------
        str
            Markdown for the frame, to be appended to its parent's content

        """
        handler = self._handlers.get(frame.tag.kind, self._render_unknown)
        return handler(frame, context or RenderContext())

    def _paint(self, kind: Paint, text: str) -> str:
        return paint(kind, text) if self.options.colors else text

    def format_reference_marker(self, marker: str) -> str:
        """Format a ``[N]`` marker of the trailing definitions block."""
        return self._paint(Paint.TARGET, marker)

    # -- structural --------------------------------------------------------

    def _render_passthrough(self, frame: Frame, context: RenderContext) -> str:
        return frame.content

    def _render_document(self, frame: Frame, context: RenderContext) -> str:
        return frame.content.strip(" \n")

    def _render_discarded(self, frame: Frame, context: RenderContext) -> str:
        logger.debug(f"Discarding <{frame.tag.name}> subtree")
        return ""

    def _render_unknown(self, frame: Frame, context: RenderContext) -> str:
        logger.debug(f"Passing through unrecognized tag <{frame.tag.name}>")
        return f"<{frame.tag.name}>{frame.content}</{frame.tag.name}>"

    # -- blocks ------------------------------------------------------------

    def _render_paragraph(self, frame: Frame, context: RenderContext) -> str:
        return "\n" + frame.content.strip(" ") + "\n"

    def _render_block(self, frame: Frame, context: RenderContext) -> str:
        content = frame.content.strip(" ")
        if not content.strip():
            return ""
        return "\n" + content + "\n"

    def _render_heading(self, frame: Frame, context: RenderContext) -> str:
        """Render ``h1``..``h6`` as ATX or, for levels 1-2, Setext headings.

        Headings are single-line: any line breaks in the content are folded
        into spaces. The Setext underline matches the visible width of the
        text, so escape codes and multi-byte characters do not distort it.
        """
        text = collapse(frame.content, strip_leading=True, strip_trailing=True)
        if not text:
            return ""

        level = frame.tag.level
        if level <= 2 and self.options.underscored_headings:
            underline = ("=" if level == 1 else "-") * visible_length(text)
            body = f"{text}\n{underline}"
        else:
            body = f"{'#' * level} {text}"
        return "\n" + self._paint(Paint.HEADING, body) + "\n"

    def _render_rule(self, frame: Frame, context: RenderContext) -> str:
        return "\n" + self._paint(Paint.RULE, THEMATIC_BREAK) + "\n"

    def _render_break(self, frame: Frame, context: RenderContext) -> str:
        return "\n"

    def _render_preformatted(self, frame: Frame, context: RenderContext) -> str:
        content = frame.content
        # A newline directly after <pre> is not part of the content
        if content.startswith("\n"):
            content = content[1:]
        content = content.rstrip("\n")
        if not content:
            return ""
        return "\n" + "\n".join("\t" + line for line in content.split("\n")) + "\n"

    def _render_blockquote(self, frame: Frame, context: RenderContext) -> str:
        content = frame.content.strip(" ").rstrip("\n")
        if not content.strip():
            return ""
        marker = self._paint(Paint.MARKER, QUOTE_MARKER)
        return "\n" + "\n".join(f"{marker} {line}" for line in content.split("\n")) + "\n"

    # -- lists -------------------------------------------------------------

    def _render_list_item(self, frame: Frame, context: RenderContext) -> str:
        """Render an ``li``.

        Inside a list the item text is returned bare, with surrounding blank
        lines removed so a sole ``<p>`` child is not framed twice; the list
        adds the marker. Outside a list the item degrades to a paragraph.
        """
        content = frame.content.strip(" \n")
        if context.in_list:
            return content
        return "\n" + content + "\n"

    def _list_start(self, frame: Frame) -> int:
        start = frame.attrs.get("start", "1")
        try:
            return int(start)
        except ValueError:
            logger.debug(f"Ignoring non-numeric list start {start!r}")
            return 1

    def _render_list(self, frame: Frame, context: RenderContext) -> str:
        """Render ``ol``/``ul`` from the frame's collected items.

        Continuation lines of an item hang under the item text: two columns
        for bullets and the width of the number plus its dot for ordered
        items. Nested lists arrive as already rendered item text and simply
        receive this level's indentation on top of their own.
        """
        ordered = frame.tag.kind is TagKind.ORDERED_LIST
        start = self._list_start(frame) if ordered else 1

        rendered_items = []
        for number, item in enumerate(frame.items, start=start):
            marker = f"{number}." if ordered else BULLET_MARKER
            indent = " " * (len(marker) if ordered else BULLET_INDENT)
            first, *rest = item.split("\n")
            lines = [f"{self._paint(Paint.MARKER, marker)} {first}"]
            lines.extend(indent + line for line in rest)
            rendered_items.append("\n".join(lines))

        # Loose text directly inside the list, outside any item
        stray = frame.content.strip(" \n")
        if stray:
            rendered_items.insert(0, stray)

        if not rendered_items:
            return ""
        return "\n" + "\n".join(rendered_items) + "\n"

    # -- inline ------------------------------------------------------------

    def _render_inline(self, content: str, marker: str, kind: Paint | None) -> str:
        # Whitespace-only spans keep their whitespace and lose their markers
        if not content.strip():
            return content
        if kind is not None and self.options.colors:
            return paint(kind, content)
        return f"{marker}{content}{marker}"

    def _render_emphasis(self, frame: Frame, context: RenderContext) -> str:
        return self._render_inline(frame.content, "_", Paint.EMPHASIS)

    def _render_strong(self, frame: Frame, context: RenderContext) -> str:
        return self._render_inline(frame.content, "**", Paint.STRONG)

    def _render_strike(self, frame: Frame, context: RenderContext) -> str:
        return self._render_inline(frame.content, "~~", None)

    def _render_code(self, frame: Frame, context: RenderContext) -> str:
        if context.in_preformatted:
            return frame.content
        if not frame.content:
            return ""
        backticks = "``" if "`" in frame.content else "`"
        return f"{backticks}{frame.content}{backticks}"

    # -- links and images --------------------------------------------------

    def _target(self, url: str, title: str | None) -> str:
        """Return the ``(url "title")`` part, or a ``[N]`` reference marker.

        A target long enough to cross the configured threshold is registered
        with the reference registry when reference links are enabled.
        """
        if self.options.reference_links and len(url) >= self.options.min_reference_link_length:
            index = self.registry.register(url, title)
            return f"[{index}]"
        if title:
            return f'({url} "{title}")'
        return f"({url})"

    def _render_link(self, frame: Frame, context: RenderContext) -> str:
        text = frame.content.strip(" ")
        url = frame.attrs.get("href")
        if url is None:
            return frame.content

        target = self._target(url, frame.attrs.get("title"))
        if self.options.colors:
            return paint(Paint.LINK, text) + paint(Paint.TARGET, target)
        return f"[{text}]{target}"

    def _render_image(self, frame: Frame, context: RenderContext) -> str:
        alt = frame.attrs.get("alt", "")
        target = self._target(frame.attrs.get("src", ""), frame.attrs.get("title"))
        if self.options.colors:
            return paint(Paint.LINK, f"![{alt}]") + paint(Paint.TARGET, target)
        return f"![{alt}]{target}"


__all__ = ["Frame", "RenderContext", "TagRenderer"]
