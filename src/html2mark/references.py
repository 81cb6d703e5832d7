#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/references.py
"""Reference-style link bookkeeping.

Long link and image targets are replaced in the body by a numbered marker
``[N]`` and collected here; the numbered definitions are written out once, as
a trailing block, after the whole document has been rendered. A registry
lives exactly as long as one conversion call, so numbering always restarts at
1 and never leaks between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceEntry:
    """One pending link definition.

    Parameters
    ----------
    index : int
        1-based position in creation order
    url : str
        Link or image target
    title : str or None, default None
        Optional title, written in double quotes after the target

    """

    index: int
    url: str
    title: str | None = None

    @property
    def marker(self) -> str:
        return f"[{self.index}]"

    def definition(self, format_marker: Callable[[str], str] = str) -> str:
        """Render the ``[N]: url "title"`` definition line."""
        line = f"{format_marker(self.marker)}: {self.url}"
        if self.title:
            line += f' "{self.title}"'
        return line


class ReferenceRegistry:
    """Ordered collection of reference entries for one conversion.

    Examples
    --------
        >>> registry = ReferenceRegistry()
        >>> registry.register("http://example.com", "Title")
        1
        >>> registry.flush()
        '\\n\\n[1]: http://example.com "Title"\\n'

    """

    def __init__(self) -> None:
        self._entries: list[ReferenceEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[ReferenceEntry, ...]:
        return tuple(self._entries)

    def register(self, url: str, title: str | None = None) -> int:
        """Record a link target and return its reference number."""
        entry = ReferenceEntry(len(self._entries) + 1, url, title or None)
        self._entries.append(entry)
        logger.debug(f"Registered reference link [{entry.index}] -> {url}")
        return entry.index

    def flush(self, format_marker: Callable[[str], str] = str) -> str:
        """Render the trailing definitions block.

        Parameters
        ----------
        format_marker : Callable[[str], str], default str
            Applied to each ``[N]`` marker, e.g. to color it

        Returns
        -------
        str
            A blank line followed by one definition per line, in creation
            order; empty when nothing was registered

        """
        if not self._entries:
            return ""
        lines = [entry.definition(format_marker) for entry in self._entries]
        return "\n\n" + "\n".join(lines) + "\n"


__all__ = ["ReferenceEntry", "ReferenceRegistry"]
