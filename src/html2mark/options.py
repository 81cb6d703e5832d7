#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rendering flags and conversion options.

A conversion is configured by a bit-set of independent :class:`RenderFlags`
plus two numeric parameters. :class:`ConversionOptions` bundles the three into
an immutable value that is built once per call and read by every stage of the
pipeline.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2mark.constants import DEFAULT_MIN_REFERENCE_LINK_LENGTH, DEFAULT_WRAP_WIDTH


class RenderFlags(enum.IntFlag):
    """Independent rendering switches, combinable with ``|``."""

    DEFAULT = 0x00
    UNDERSCORED_HEADINGS = 0x01
    MAKE_REFERENCE_LINKS = 0x02
    COLORS = 0x04
    WRAP = 0x08


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    """Configuration for a single HTML to Markdown conversion.

    Parameters
    ----------
    flags : RenderFlags, default RenderFlags.DEFAULT
        Bit-set of rendering switches.
    min_reference_link_length : int, default 20
        Link and image targets at least this long become reference-style
        links when ``MAKE_REFERENCE_LINKS`` is set.
    wrap_width : int, default 80
        Column width used by the word wrapper when ``WRAP`` is set.

    Examples
    --------
        >>> options = ConversionOptions(RenderFlags.COLORS | RenderFlags.WRAP, wrap_width=40)
        >>> options.colors, options.wrap
        (True, True)

    """

    flags: RenderFlags = field(
        default=RenderFlags.DEFAULT,
        metadata={"help": "Bit-set of rendering switches", "importance": "core"},
    )
    min_reference_link_length: int = field(
        default=DEFAULT_MIN_REFERENCE_LINK_LENGTH,
        metadata={
            "help": "Minimum target length that turns a link or image into a reference-style link",
            "type": int,
            "importance": "advanced",
        },
    )
    wrap_width: int = field(
        default=DEFAULT_WRAP_WIDTH,
        metadata={"help": "Column width for hard wrapping", "type": int, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and normalize the flag set.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        # Plain integers are accepted for compatibility with bitwise-or'ed constants
        if not isinstance(self.flags, RenderFlags):
            object.__setattr__(self, "flags", RenderFlags(self.flags))
        if self.min_reference_link_length < 0:
            raise ValueError(f"min_reference_link_length must be non-negative, got {self.min_reference_link_length}")
        if self.wrap_width <= 0:
            raise ValueError(f"wrap_width must be positive, got {self.wrap_width}")

    @property
    def underscored_headings(self) -> bool:
        return bool(self.flags & RenderFlags.UNDERSCORED_HEADINGS)

    @property
    def reference_links(self) -> bool:
        return bool(self.flags & RenderFlags.MAKE_REFERENCE_LINKS)

    @property
    def colors(self) -> bool:
        return bool(self.flags & RenderFlags.COLORS)

    @property
    def wrap(self) -> bool:
        return bool(self.flags & RenderFlags.WRAP)


__all__ = ["RenderFlags", "ConversionOptions", "CloneFrozenMixin"]
