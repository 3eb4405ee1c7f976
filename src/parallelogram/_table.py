"""Sparse sentence alignment table with anchor bookkeeping."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterator

from ._errors import EmptyTextError
from ._types import ORIGIN, Coordinates


class SentenceAlignmentTable:
    """Accumulates alignment evidence between sentences of text A and B.

    Scores live in a dict of dicts keyed by x then y. Coordinates whose score
    reaches `anchor_threshold` are also recorded in sorted per-column lists
    (`_anchor_xs` plus `_anchor_ys[x]`) so anchor scans use bisection instead
    of walking every scored cell.
    """

    __slots__ = (
        "_anchor_threshold", "_end", "_scores", "_anchor_xs", "_anchor_ys",
    )

    def __init__(self, n_a: int, n_b: int, anchor_threshold: int) -> None:
        if n_a < 1 or n_b < 1:
            raise EmptyTextError(
                f"both texts need at least one sentence, got {n_a} and {n_b}"
            )
        if anchor_threshold < 1:
            raise ValueError(
                f"anchor_threshold must be >= 1, got {anchor_threshold}"
            )
        self._anchor_threshold = anchor_threshold
        self._end = Coordinates(n_b - 1, n_a - 1)
        self._scores: dict[int, dict[int, int]] = {}
        self._anchor_xs: list[int] = []
        self._anchor_ys: dict[int, list[int]] = {}

    @property
    def end(self) -> Coordinates:
        return self._end

    @property
    def anchor_threshold(self) -> int:
        return self._anchor_threshold

    def score(self, c: Coordinates) -> int:
        ys = self._scores.get(c.x)
        if ys is None:
            return 0
        return ys.get(c.y, 0)

    def is_anchor(self, c: Coordinates) -> bool:
        return self.score(c) >= self._anchor_threshold

    def increment(self, c: Coordinates) -> int:
        """Add one to the score at `c` and return the new score."""
        ys = self._scores.setdefault(c.x, {})
        new = ys.get(c.y, 0) + 1
        ys[c.y] = new
        if new == self._anchor_threshold:
            column = self._anchor_ys.get(c.x)
            if column is None:
                insort(self._anchor_xs, c.x)
                column = self._anchor_ys[c.x] = []
            insort(column, c.y)
        return new

    def crossover(self, c: Coordinates) -> bool:
        """True if accepting `c` as an anchor would cross an existing anchor."""
        xs = self._anchor_xs
        # Columns to the right holding an anchor below `c`.
        for x in xs[bisect_right(xs, c.x):]:
            if self._anchor_ys[x][0] < c.y:
                return True
        # Columns to the left holding an anchor above `c`.
        for x in xs[:bisect_left(xs, c.x)]:
            if self._anchor_ys[x][-1] > c.y:
                return True
        return False

    def next_anchor(self, start: Coordinates | None) -> Coordinates:
        """Return the first anchor strictly after `start` on both axes.

        `None` yields the origin, which need not be an anchor. When no
        anchor remains the table's `end` is returned.
        """
        if start is None:
            return ORIGIN
        end = self._end
        xs = self._anchor_xs
        for x in xs[bisect_right(xs, start.x):]:
            if x > end.x:
                break
            column = self._anchor_ys[x]
            i = bisect_right(column, start.y)
            if i < len(column) and column[i] <= end.y:
                return Coordinates(x, column[i])
        return end

    def anchors(self) -> Iterator[Coordinates]:
        for x in self._anchor_xs:
            for y in self._anchor_ys[x]:
                yield Coordinates(x, y)

    def __len__(self) -> int:
        return sum(len(ys) for ys in self._scores.values())
