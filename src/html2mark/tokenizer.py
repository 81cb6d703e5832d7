#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/tokenizer.py
"""Flat token stream over possibly malformed HTML.

The tag-stack engine does not want a tree: it wants the markup exactly as
written, with stray and out-of-order closing tags intact, so it can decide
for itself how to recover. :class:`HtmlTokenizer` builds on the standard
library's tolerant ``HTMLParser`` and records every start tag, end tag and
run of text in document order. :class:`TagReader` walks that stream the way
the engine consumes it: one tag at a time, together with the text that
preceded it.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from html.parser import HTMLParser

logger = logging.getLogger(__name__)


class TokenKind(enum.Enum):
    """Kinds of tokens produced by the tokenizer."""

    OPEN = "open"
    CLOSE = "close"
    SELF_CLOSING = "self_closing"
    TEXT = "text"


@dataclass(frozen=True)
class Token:
    """A single lexical item of the markup.

    Parameters
    ----------
    kind : TokenKind
        Token kind
    name : str, default ""
        Lowercase tag name; empty for text tokens
    attrs : dict[str, str]
        Tag attributes with entities decoded; boolean attributes map to ""
    text : str, default ""
        Character data for text tokens

    """

    kind: TokenKind
    name: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    text: str = ""

    @property
    def is_tag(self) -> bool:
        return self.kind is not TokenKind.TEXT


class HtmlTokenizer(HTMLParser):
    """Collect HTML tokens in document order without building a tree.

    Comments, doctype declarations and processing instructions are dropped.
    Character references are decoded, including inside attribute values.

    Examples
    --------
        >>> [t.kind.value for t in HtmlTokenizer.tokenize("<p>Hi<br/></b>")]
        ['open', 'text', 'self_closing', 'close']

    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.tokens: list[Token] = []

    @classmethod
    def tokenize(cls, html: str) -> list[Token]:
        tokenizer = cls()
        tokenizer.feed(html)
        tokenizer.close()
        return tokenizer.tokens

    @staticmethod
    def _attrs(attrs: list[tuple[str, str | None]]) -> dict[str, str]:
        # The first occurrence of a repeated attribute wins, as in browsers
        result: dict[str, str] = {}
        for key, value in attrs:
            result.setdefault(key, value if value is not None else "")
        return result

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.tokens.append(Token(TokenKind.OPEN, tag, self._attrs(attrs)))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.tokens.append(Token(TokenKind.SELF_CLOSING, tag, self._attrs(attrs)))

    def handle_endtag(self, tag: str) -> None:
        self.tokens.append(Token(TokenKind.CLOSE, tag))

    def handle_data(self, data: str) -> None:
        if not data:
            return
        # Adjacent data chunks are merged so text always arrives in one piece
        if self.tokens and self.tokens[-1].kind is TokenKind.TEXT:
            previous = self.tokens.pop()
            data = previous.text + data
        self.tokens.append(Token(TokenKind.TEXT, text=data))

    def handle_comment(self, data: str) -> None:
        logger.debug("Dropping HTML comment")

    def handle_decl(self, decl: str) -> None:
        logger.debug(f"Dropping declaration: {decl[:40]}")


class TagReader:
    """Cursor over a token stream, advancing from tag to tag.

    After each call to :meth:`advance`, :attr:`content` holds the text that
    appeared between the previous tag and the current one, and
    :attr:`current` holds the current tag token (``None`` once the input is
    exhausted). Text that trails the final tag is reported by the last call,
    the one that returns ``None``.

    Parameters
    ----------
    html : str
        Markup to read

    """

    def __init__(self, html: str) -> None:
        self._tokens = HtmlTokenizer.tokenize(html)
        self._position = 0
        self.content: str = ""
        self.current: Token | None = None

    def advance(self) -> Token | None:
        """Move to the next tag and return it, or None at end of input."""
        parts: list[str] = []
        while self._position < len(self._tokens):
            token = self._tokens[self._position]
            self._position += 1
            if token.is_tag:
                self.content = "".join(parts)
                self.current = token
                return token
            parts.append(token.text)
        self.content = "".join(parts)
        self.current = None
        return None


__all__ = ["Token", "TokenKind", "HtmlTokenizer", "TagReader"]
