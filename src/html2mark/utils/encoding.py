#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/utils/encoding.py
"""Character encoding detection for HTML input given as bytes.

The converter itself works on ``str``. When callers hand over raw bytes (for
example the contents of a file read in binary mode) the encoding is sniffed
with BeautifulSoup's ``UnicodeDammit``, which honours byte-order marks and
``<meta charset>`` declarations before falling back to statistical detection.
"""

from __future__ import annotations

import logging
from typing import Sequence

from html2mark.exceptions import ParsingError

logger = logging.getLogger(__name__)


def decode_html_bytes(data: bytes, known_encodings: Sequence[str] = ("utf-8",)) -> str:
    """Decode HTML bytes into text.

    Parameters
    ----------
    data : bytes
        Raw HTML document
    known_encodings : Sequence[str], default ("utf-8",)
        Encodings tried before any detection takes place

    Returns
    -------
    str
        Decoded markup

    Raises
    ------
    ParsingError
        If no encoding could decode the data

    """
    if not data:
        return ""

    from bs4.dammit import UnicodeDammit

    dammit = UnicodeDammit(data, known_definite_encodings=list(known_encodings), is_html=True)
    if dammit.unicode_markup is None:
        raise ParsingError("Could not determine the character encoding of the HTML input", parsing_stage="decoding")

    logger.debug(f"Decoded {len(data)} bytes of HTML as {dammit.original_encoding}")
    if dammit.contains_replacement_characters:
        logger.warning("Some bytes could not be decoded and were replaced with U+FFFD")
    return dammit.unicode_markup


__all__ = ["decode_html_bytes"]
