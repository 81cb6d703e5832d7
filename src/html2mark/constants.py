#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for html2mark.

This module centralizes the magic numbers, escape sequences and tag tables
used across the converter. Constants are organized by category:

1. Conversion Defaults - numeric parameters of a conversion call
2. Tag Tables - element names grouped by rendering behaviour
3. Terminal Colors - ANSI SGR sequences used by the color overlay
"""

from __future__ import annotations

import re

# =============================================================================
# Conversion Defaults
# =============================================================================

DEFAULT_MIN_REFERENCE_LINK_LENGTH = 20
DEFAULT_WRAP_WIDTH = 80
DEFAULT_TAB_WIDTH = 8

# Characters folded into a single space by the whitespace collapser
WHITESPACE_CHARACTERS = " \t\n\r\f\v"

BULLET_MARKER = "*"
BULLET_INDENT = 2
QUOTE_MARKER = ">"
THEMATIC_BREAK = "* * *"

# =============================================================================
# Tag Tables
# =============================================================================

# Elements that never have content; they are rendered as soon as they are seen
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

EMPHASIS_TAGS = frozenset({"em", "i"})
STRONG_TAGS = frozenset({"b", "strong"})
STRIKE_TAGS = frozenset({"s", "del", "strike"})
CODE_TAGS = frozenset({"code", "kbd", "samp", "tt"})
DOCUMENT_TAGS = frozenset({"html", "body"})
DISCARDED_TAGS = frozenset({"head", "script", "style", "title"})
BLOCK_TAGS = frozenset(
    {
        "div",
        "section",
        "article",
        "header",
        "footer",
        "main",
        "nav",
        "aside",
        "figure",
        "address",
    }
)

# =============================================================================
# Terminal Colors
# =============================================================================

ANSI_RESET = "\x1b[0m"
ANSI_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

COLOR_GREEN = 32
COLOR_YELLOW = 33
COLOR_BLUE = 34
COLOR_PURPLE = 35
COLOR_CYAN = 36
COLOR_WHITE = 37

# Span markers are drawn from Supplementary Private Use Area-A so they never
# collide with ordinary document text.
SPAN_OPEN_BASE = 0xF0000
SPAN_CLOSE = "\U000f00ff"
SPAN_MARKER_PATTERN = re.compile("[\U000f0000-\U000f00ff]")
