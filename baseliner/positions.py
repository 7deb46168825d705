"""Offset to line/column mapping."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator

from .model import IssueRange
from .util.text import iter_lines


class PositionMapper:
    """Maps absolute offsets of one document to 0-based ``(line, column)``."""

    def __init__(self, text: str) -> None:
        self._line_starts = [0]
        self._line_starts.extend(
            index + 1 for index, char in enumerate(text) if char == "\n"
        )

    def locate(self, offset: int) -> tuple[int, int]:
        line = max(bisect_right(self._line_starts, offset) - 1, 0)
        return line, max(offset - self._line_starts[line], 0)

    def span(self, start: int, end: int) -> IssueRange:
        """Range of ``[start, end)``, reported on the line holding ``start``."""
        line, column = self.locate(start)
        return IssueRange(line=line, start=column, end=column + max(end - start, 0))


def region_lines(text: str, base: int = 0) -> Iterator[tuple[int, str]]:
    """Yield lines of a sub-range whose first character sits at ``base``.

    Offsets are absolute in the enclosing document, so they can be handed to the
    document's :class:`PositionMapper` directly.
    """
    for offset, line in iter_lines(text):
        yield base + offset, line
