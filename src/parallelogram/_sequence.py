"""Global sequence alignment in linear space (Needleman-Wunsch / Hirschberg).

Elements are compared with a caller-supplied compatibility predicate instead
of equality, so the same routine can count order-preserving pairs of any
two kinds of objects.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class Alignment:
    score: float
    # (i, j) index pairs; None marks a gap on that side.
    pairs: list[tuple[int | None, int | None]]


@dataclass(slots=True, frozen=True)
class GlobalAligner:
    match_score: float = 1
    mismatch_score: float = -1
    gap_score: float = -1
    compatible: Callable[[Any, Any], bool] = field(default=operator.eq)

    def score(self, a: Sequence[Any], b: Sequence[Any]) -> float:
        """Optimal global alignment score of `a` against `b`."""
        return self._last_row(a, b)[-1]

    def align(self, a: Sequence[Any], b: Sequence[Any]) -> Alignment:
        """Optimal global alignment with its pairs (Hirschberg's method)."""
        pairs: list[tuple[int | None, int | None]] = []
        self._hirschberg(a, b, 0, 0, pairs)
        return Alignment(score=self.score(a, b), pairs=pairs)

    # -- Internal methods --

    def _substitution(self, x: Any, y: Any) -> float:
        return self.match_score if self.compatible(x, y) else self.mismatch_score

    def _last_row(self, a: Sequence[Any], b: Sequence[Any]) -> list[float]:
        """Last row of the Needleman-Wunsch matrix, kept two rows at a time."""
        gap = self.gap_score
        prev = [j * gap for j in range(len(b) + 1)]
        for i, x in enumerate(a, 1):
            cur = [i * gap]
            for j, y in enumerate(b, 1):
                cur.append(max(
                    prev[j - 1] + self._substitution(x, y),
                    prev[j] + gap,
                    cur[j - 1] + gap,
                ))
            prev = cur
        return prev

    def _last_row_reversed(
        self, a: Sequence[Any], b: Sequence[Any]
    ) -> list[float]:
        """Scores of suffixes of `a` against every suffix of `b`.

        Element j holds the best score of `a` against `b[len(b) - j:]`.
        """
        return self._last_row(a[::-1], b[::-1])

    def _hirschberg(
        self,
        a: Sequence[Any],
        b: Sequence[Any],
        a_offset: int,
        b_offset: int,
        out: list[tuple[int | None, int | None]],
    ) -> None:
        if not a:
            out.extend((None, b_offset + j) for j in range(len(b)))
            return
        if not b:
            out.extend((a_offset + i, None) for i in range(len(a)))
            return
        if len(a) == 1 or len(b) == 1:
            out.extend(
                (None if i is None else a_offset + i,
                 None if j is None else b_offset + j)
                for i, j in self._needleman_wunsch(a, b)
            )
            return

        mid = len(a) // 2
        left = self._last_row(a[:mid], b)
        right = self._last_row_reversed(a[mid:], b)
        n = len(b)
        split = max(range(n + 1), key=lambda j: (left[j] + right[n - j], -j))
        self._hirschberg(a[:mid], b[:split], a_offset, b_offset, out)
        self._hirschberg(
            a[mid:], b[split:], a_offset + mid, b_offset + split, out,
        )

    def _needleman_wunsch(
        self, a: Sequence[Any], b: Sequence[Any]
    ) -> list[tuple[int | None, int | None]]:
        """Full-matrix alignment with traceback, used for the small cases."""
        m, n = len(a), len(b)
        gap = self.gap_score
        dp = [[0.0] * (n + 1) for _ in range(m + 1)]
        for i in range(1, m + 1):
            dp[i][0] = i * gap
        for j in range(1, n + 1):
            dp[0][j] = j * gap
        for i in range(1, m + 1):
            for j in range(1, n + 1):
                dp[i][j] = max(
                    dp[i - 1][j - 1] + self._substitution(a[i - 1], b[j - 1]),
                    dp[i - 1][j] + gap,
                    dp[i][j - 1] + gap,
                )

        pairs: list[tuple[int | None, int | None]] = []
        i, j = m, n
        while i > 0 or j > 0:
            # Fractional scores do not add up exactly; compare with a tolerance
            # and take the only legal move along the matrix edges.
            if i > 0 and j > 0 and math.isclose(
                dp[i][j],
                dp[i - 1][j - 1] + self._substitution(a[i - 1], b[j - 1]),
                abs_tol=1e-9,
            ):
                pairs.append((i - 1, j - 1))
                i, j = i - 1, j - 1
            elif j == 0 or (
                i > 0
                and math.isclose(dp[i][j], dp[i - 1][j] + gap, abs_tol=1e-9)
            ):
                pairs.append((i - 1, None))
                i -= 1
            else:
                pairs.append((None, j - 1))
                j -= 1
        pairs.reverse()
        return pairs
