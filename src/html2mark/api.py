#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/api.py
"""Public conversion entry point.

:func:`html_to_markdown` runs the full pipeline for one document::

    markup -> tokenizer -> tag-stack engine (tag renderer, reference registry)
           -> color overlay (COLORS) -> word wrapper (WRAP) -> text

Every call builds its own engine and registry, so the function is reentrant
and safe to call from concurrent threads.
"""

from __future__ import annotations

import logging
from typing import Union

from html2mark.colors import apply_colors
from html2mark.constants import DEFAULT_MIN_REFERENCE_LINK_LENGTH, DEFAULT_WRAP_WIDTH
from html2mark.engine import TagStackEngine
from html2mark.exceptions import ValidationError
from html2mark.options import ConversionOptions, RenderFlags
from html2mark.utils.encoding import decode_html_bytes
from html2mark.wrap import wrap_text

logger = logging.getLogger(__name__)


def _build_options(options: int, min_reference_link_length: int, wrap_width: int) -> ConversionOptions:
    try:
        return ConversionOptions(
            flags=RenderFlags(options),
            min_reference_link_length=min_reference_link_length,
            wrap_width=wrap_width,
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid conversion options: {e}", parameter_name="options", original_error=e) from e


def html_to_markdown(
    html: Union[str, bytes],
    options: int = RenderFlags.DEFAULT,
    min_reference_link_length: int = DEFAULT_MIN_REFERENCE_LINK_LENGTH,
    wrap_width: int = DEFAULT_WRAP_WIDTH,
) -> str:
    """Convert an HTML fragment to Markdown-flavored text.

    Parameters
    ----------
    html : str or bytes
        Markup to convert. It does not need to be well-formed: unclosed,
        misnested and stray closing tags are all tolerated. Bytes are decoded
        with encoding detection.
    options : int, default RenderFlags.DEFAULT
        Bitwise-or of :class:`RenderFlags` values
    min_reference_link_length : int, default 20
        Targets at least this long become reference-style links when
        ``MAKE_REFERENCE_LINKS`` is set
    wrap_width : int, default 80
        Column width used when ``WRAP`` is set

    Returns
    -------
    str
        Converted document

    Raises
    ------
    ValidationError
        If the input is neither text nor bytes, or a numeric parameter is out
        of range
    ParsingError
        If bytes input cannot be decoded

    Examples
    --------
        >>> html_to_markdown("<p>Text</p>")
        '\\nText\\n'
        >>> html_to_markdown("<h1>Text</h1>", RenderFlags.UNDERSCORED_HEADINGS)
        '\\nText\\n====\\n'

    """
    conversion_options = _build_options(options, min_reference_link_length, wrap_width)

    if isinstance(html, (bytes, bytearray)):
        html = decode_html_bytes(bytes(html))
    elif not isinstance(html, str):
        raise ValidationError(
            f"html must be str or bytes, not {type(html).__name__}",
            parameter_name="html",
            parameter_value=type(html).__name__,
        )

    return convert(html, conversion_options)


def convert(html: str, options: ConversionOptions) -> str:
    """Run the conversion pipeline with prepared options.

    Parameters
    ----------
    html : str
        Markup to convert
    options : ConversionOptions
        Validated options

    Returns
    -------
    str
        Converted document

    """
    engine = TagStackEngine(options)
    result = engine.convert(html)
    logger.debug(f"Rendered {len(html)} characters of HTML into {len(result)} characters")

    if options.colors:
        result = apply_colors(result)
    if options.wrap:
        result = wrap_text(result, options.wrap_width)
    return result


__all__ = ["html_to_markdown", "convert"]
