"""html2mark - convert (possibly malformed) HTML into Markdown-flavored text.

html2mark walks the markup tag by tag with a stack of open elements instead of
building a DOM, so unclosed tags, misnested tags and stray closing tags never
make a conversion fail. The output can optionally be colored with ANSI escape
codes for terminal display and hard-wrapped to a column width.

Key Features
------------
- Tolerant tag-stack conversion of the Markdown-relevant HTML subset
- Setext (underlined) or ATX (``#``) headings
- Inline or numbered reference-style links and images
- Nested ordered and unordered lists with hanging indentation
- ANSI color output whose colors survive line wrapping
- Unicode-aware word wrapping that ignores escape codes

Examples
--------
Basic usage:

    >>> from html2mark import html_to_markdown
    >>> html_to_markdown("<ol><li>one</li><li>two<li>three</ol>")
    '\\n1. one\\n2. two\\n3. three\\n'

Combining options:

    >>> from html2mark import MAKE_REFERENCE_LINKS, UNDERSCORED_HEADINGS
    >>> text = html_to_markdown(page, UNDERSCORED_HEADINGS | MAKE_REFERENCE_LINKS)  # doctest: +SKIP

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import logging

from html2mark.api import html_to_markdown
from html2mark.exceptions import Html2MarkError, ParsingError, ValidationError
from html2mark.options import ConversionOptions, RenderFlags
from html2mark.utils.text import collapse

__version__ = "0.1.0"

DEFAULT = RenderFlags.DEFAULT
UNDERSCORED_HEADINGS = RenderFlags.UNDERSCORED_HEADINGS
MAKE_REFERENCE_LINKS = RenderFlags.MAKE_REFERENCE_LINKS
COLORS = RenderFlags.COLORS
WRAP = RenderFlags.WRAP

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "html_to_markdown",
    "collapse",
    "RenderFlags",
    "ConversionOptions",
    "DEFAULT",
    "UNDERSCORED_HEADINGS",
    "MAKE_REFERENCE_LINKS",
    "COLORS",
    "WRAP",
    "Html2MarkError",
    "ValidationError",
    "ParsingError",
    "__version__",
]
