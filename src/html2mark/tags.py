#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/tags.py
"""Classification of tag names into rendering kinds.

Every tag the converter meets is mapped onto a closed set of
:class:`TagKind` values. Anything outside the recognised subset becomes
``UNKNOWN`` and keeps its original name so it can be passed through
literally.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from html2mark.constants import (
    BLOCK_TAGS,
    CODE_TAGS,
    DISCARDED_TAGS,
    DOCUMENT_TAGS,
    EMPHASIS_TAGS,
    STRIKE_TAGS,
    STRONG_TAGS,
    VOID_ELEMENTS,
)

_HEADING_PATTERN = re.compile(r"h([1-6])")


class TagKind(enum.Enum):
    """Rendering behaviour of a tag."""

    ROOT = "root"
    PARAGRAPH = "paragraph"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKE = "strike"
    CODE = "code"
    HEADING = "heading"
    RULE = "rule"
    BREAK = "break"
    LINK = "link"
    IMAGE = "image"
    PREFORMATTED = "preformatted"
    ORDERED_LIST = "ordered_list"
    UNORDERED_LIST = "unordered_list"
    LIST_ITEM = "list_item"
    BLOCKQUOTE = "blockquote"
    DOCUMENT = "document"
    SPAN = "span"
    DISCARDED = "discarded"
    BLOCK = "block"
    UNKNOWN = "unknown"


_SIMPLE_KINDS: dict[str, TagKind] = {
    "": TagKind.ROOT,
    "p": TagKind.PARAGRAPH,
    "hr": TagKind.RULE,
    "br": TagKind.BREAK,
    "a": TagKind.LINK,
    "img": TagKind.IMAGE,
    "pre": TagKind.PREFORMATTED,
    "ol": TagKind.ORDERED_LIST,
    "ul": TagKind.UNORDERED_LIST,
    "li": TagKind.LIST_ITEM,
    "blockquote": TagKind.BLOCKQUOTE,
    "span": TagKind.SPAN,
}

_GROUPED_KINDS: tuple[tuple[frozenset[str], TagKind], ...] = (
    (EMPHASIS_TAGS, TagKind.EMPHASIS),
    (STRONG_TAGS, TagKind.STRONG),
    (STRIKE_TAGS, TagKind.STRIKE),
    (CODE_TAGS, TagKind.CODE),
    (DOCUMENT_TAGS, TagKind.DOCUMENT),
    (DISCARDED_TAGS, TagKind.DISCARDED),
    (BLOCK_TAGS, TagKind.BLOCK),
)

LIST_KINDS = frozenset({TagKind.ORDERED_LIST, TagKind.UNORDERED_LIST})

# Text inside these keeps its whitespace exactly as written
VERBATIM_KINDS = frozenset({TagKind.PREFORMATTED, TagKind.CODE})

# An implicit paragraph close never reaches past one of these
PARAGRAPH_BOUNDARY_KINDS = frozenset(
    {
        TagKind.ROOT,
        TagKind.ORDERED_LIST,
        TagKind.UNORDERED_LIST,
        TagKind.LIST_ITEM,
        TagKind.BLOCKQUOTE,
        TagKind.BLOCK,
        TagKind.PREFORMATTED,
    }
)


@dataclass(frozen=True)
class Tag:
    """A classified tag name.

    Parameters
    ----------
    name : str
        Lowercase tag name as written in the markup
    kind : TagKind
        Rendering behaviour
    level : int, default 0
        Heading level for ``HEADING`` tags

    """

    name: str
    kind: TagKind
    level: int = 0

    @property
    def is_void(self) -> bool:
        return self.name in VOID_ELEMENTS


def classify(name: str) -> Tag:
    """Map a tag name onto its rendering kind.

    Parameters
    ----------
    name : str
        Tag name, already lowercased by the tokenizer

    Returns
    -------
    Tag
        Classified tag; unrecognised names, including ``h`` followed by
        anything other than a single digit from 1 to 6, are ``UNKNOWN``

    Examples
    --------
        >>> classify("h2")
        Tag(name='h2', kind=<TagKind.HEADING: 'heading'>, level=2)
        >>> classify("h7").kind
        <TagKind.UNKNOWN: 'unknown'>

    """
    kind = _SIMPLE_KINDS.get(name)
    if kind is not None:
        return Tag(name, kind)

    for names, grouped_kind in _GROUPED_KINDS:
        if name in names:
            return Tag(name, grouped_kind)

    heading = _HEADING_PATTERN.fullmatch(name)
    if heading:
        return Tag(name, TagKind.HEADING, int(heading.group(1)))

    return Tag(name, TagKind.UNKNOWN)


ROOT_TAG = classify("")

__all__ = [
    "Tag",
    "TagKind",
    "classify",
    "ROOT_TAG",
    "LIST_KINDS",
    "VERBATIM_KINDS",
    "PARAGRAPH_BOUNDARY_KINDS",
]
