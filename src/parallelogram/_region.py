"""Banded candidate region around the path through the current anchors."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import TYPE_CHECKING

from ._types import Coordinates

if TYPE_CHECKING:
    from ._table import SentenceAlignmentTable


class AlignableRegion:
    """Set of sentence pairs eligible for new evidence during one cycle."""

    __slots__ = ("_cells", "_size")

    def __init__(self) -> None:
        self._cells: dict[int, set[int]] = {}
        self._size = 0

    @classmethod
    def from_table(cls, table: SentenceAlignmentTable) -> AlignableRegion:
        """Build the region from the anchors currently held by `table`.

        Consecutive anchors (starting at the origin, ending at the table's
        end) are joined by a lens-shaped band: one cell wide next to each
        anchor and about sqrt(distance) wide halfway between them.
        """
        region = cls()
        start = table.next_anchor(None)
        end = table.next_anchor(start)
        if start == end:
            # 1x1 texts: the whole table is a single point.
            region.insert(start)
            return region
        while start != end:
            region._fill_segment(start, end)
            start = end
            end = table.next_anchor(start)
        return region

    def _fill_segment(self, start: Coordinates, end: Coordinates) -> None:
        dx = end.x - start.x
        dy = end.y - start.y
        if dx > dy:
            # Walk y, band along x.
            for y, lo, hi in _band(start.y, end.y, start.x, end.x):
                for x in range(lo, hi + 1):
                    self._add(x, y)
        else:
            # Walk x, band along y.
            for x, lo, hi in _band(start.x, end.x, start.y, end.y):
                for y in range(lo, hi + 1):
                    self._add(x, y)

    def _add(self, x: int, y: int) -> None:
        ys = self._cells.setdefault(x, set())
        if y not in ys:
            ys.add(y)
            self._size += 1

    def insert(self, c: Coordinates) -> None:
        self._add(c.x, c.y)

    def has(self, x: int, y: int) -> bool:
        ys = self._cells.get(x)
        return ys is not None and y in ys

    def contains(self, c: Coordinates) -> bool:
        return self.has(c.x, c.y)

    def all(self) -> Iterator[Coordinates]:
        """Yield every cell in (x, y) order."""
        for x in sorted(self._cells):
            for y in sorted(self._cells[x]):
                yield Coordinates(x, y)

    def __contains__(self, c: object) -> bool:
        return isinstance(c, Coordinates) and self.has(c.x, c.y)

    def __len__(self) -> int:
        return self._size


def _band(
    outer_start: int, outer_end: int, inner_start: int, inner_end: int,
) -> Iterator[tuple[int, int, int]]:
    """Yield (outer, inner_lo, inner_hi) rows of one segment's band."""
    outer_span = outer_end - outer_start
    inner_span = inner_end - inner_start
    if outer_span == 0:
        # Axis-aligned segment: no interpolation, take the full inner range.
        yield outer_start, inner_start, inner_end
        return
    root = math.sqrt(inner_span)
    for s in range(outer_start, outer_end + 1):
        progress = (s - outer_start) / outer_span
        taper = abs(0.5 - progress) / 0.5
        width = max(1, math.floor(root * (1.0 - taper)))
        center = inner_start + progress * inner_span
        lo = max(inner_start, math.floor(center - width / 2))
        hi = min(inner_end, math.floor(center + width / 2))
        yield s, lo, hi
