#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/utils/__init__.py
"""Utility modules for the html2mark package.

This package contains the whitespace and width helpers shared by the tag
renderer and the word wrapper, and the input decoding helpers used by the
public API.
"""

from html2mark.utils.encoding import decode_html_bytes
from html2mark.utils.text import collapse, strip_markup, visible_length

__all__ = [
    "collapse",
    "decode_html_bytes",
    "strip_markup",
    "visible_length",
]
