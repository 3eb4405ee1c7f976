"""Word association scoring, ranking and sentence promotion."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator, Sequence
from typing import TYPE_CHECKING, Any

from ._sequence import GlobalAligner
from ._types import FORCED_OCCURRENCES, Coordinates, WordAssociation

if TYPE_CHECKING:
    from ._index import WordSentenceIndex
    from ._region import AlignableRegion
    from ._table import SentenceAlignmentTable

logger = logging.getLogger(__name__)


class WordAssociationTable:
    """Ranked collection of word associations, one entry per (a, b) pair.

    Iteration yields associations by descending similarity, then descending
    total occurrences, then descending word A, then descending word B.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[tuple[Hashable, Hashable], WordAssociation] = {}

    def insert(self, association: WordAssociation) -> bool:
        """Add `association`; return False if its pair is already ranked."""
        key = (association.a, association.b)
        if key in self._entries:
            return False
        self._entries[key] = association
        return True

    def __iter__(self) -> Iterator[WordAssociation]:
        return iter(sorted(
            self._entries.values(), key=lambda wa: wa.rank_key, reverse=True,
        ))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pair: object) -> bool:
        return pair in self._entries


class WordAssociationScorer:
    """Scores word pairs against one cycle's alignable region.

    Holds the per-cycle region together with the long-lived texts and
    indexes; a new scorer is created for every cycle.
    """

    __slots__ = (
        "_region", "_a", "_b", "_a_index", "_b_index", "_mapper", "_aligner",
    )

    def __init__(
        self,
        region: AlignableRegion,
        a: Sequence[Sequence[Hashable]],
        b: Sequence[Sequence[Hashable]],
        a_index: WordSentenceIndex,
        b_index: WordSentenceIndex,
        association_mapper: Callable[[Any, Any], bool],
    ) -> None:
        self._region = region
        self._a = a
        self._b = b
        self._a_index = a_index
        self._b_index = b_index
        self._mapper = association_mapper
        # Candidates are A sentence indices (y) against B sentence indices
        # (x); two of them match when (x, y) lies inside the region.
        self._aligner = GlobalAligner(
            match_score=1,
            mismatch_score=0,
            gap_score=0,
            compatible=lambda y, x: region.has(x, y),
        )

    def similarity(self, a: Hashable, b: Hashable) -> float:
        """Dice-style similarity of the sentence distributions of `a` and `b`.

        The numerator counts the largest set of order-preserving occurrence
        pairs that fall inside the region.
        """
        a_candidates = list(self._a_index.sentences(a))
        b_candidates = list(self._b_index.sentences(b))
        total = len(a_candidates) + len(b_candidates)
        if total == 0:
            return 0.0
        c = self._aligner.score(a_candidates, b_candidates)
        return 2 * c / total

    def associate(self, a: Hashable, b: Hashable) -> WordAssociation:
        if self._mapper(a, b):
            return WordAssociation(
                a=a,
                b=b,
                similarity=1.0,
                a_occurrences=FORCED_OCCURRENCES,
                b_occurrences=FORCED_OCCURRENCES,
            )
        return WordAssociation(
            a=a,
            b=b,
            similarity=self.similarity(a, b),
            a_occurrences=self._a_index.occurrences(a),
            b_occurrences=self._b_index.occurrences(b),
        )

    def build_table(
        self, similarity_threshold: float, frequency_threshold: int,
    ) -> WordAssociationTable:
        """Score every word pair co-occurring inside the region and rank them."""
        visited: set[tuple[Hashable, Hashable]] = set()
        table = WordAssociationTable()
        for c in self._region.all():
            b_words = self._b[c.x]
            for a_word in self._a[c.y]:
                for b_word in b_words:
                    pair = (a_word, b_word)
                    if pair in visited:
                        continue
                    visited.add(pair)
                    association = self.associate(a_word, b_word)
                    if (
                        association.similarity >= similarity_threshold
                        and association.a_occurrences >= frequency_threshold
                        and association.b_occurrences >= frequency_threshold
                    ):
                        table.insert(association)
        return table

    def align_sentences(
        self,
        association: WordAssociation,
        table: SentenceAlignmentTable,
    ) -> list[Coordinates]:
        """Reinforce the sentence pairs `association` uniquely explains.

        A pair (x, y) qualifies when, inside the region, B sentence x is the
        only partner of A sentence y for this word pair and vice versa. The
        batch is all or nothing: if any qualifying pair would create a
        crossing anchor, nothing is incremented.
        """
        region = self._region
        a_to_b: dict[int, set[int]] = {}
        b_to_a: dict[int, set[int]] = {}
        b_sentences = set(self._b_index.sentences(association.b))
        for y in set(self._a_index.sentences(association.a)):
            for x in b_sentences:
                if region.has(x, y):
                    a_to_b.setdefault(y, set()).add(x)
                    b_to_a.setdefault(x, set()).add(y)

        matches: list[Coordinates] = []
        for x, ys in b_to_a.items():
            if len(ys) != 1:
                continue
            (y,) = ys
            if a_to_b[y] == {x}:
                matches.append(Coordinates(x, y))
        matches.sort()

        # Mutual unique matches have distinct x and y; sorted by x, y must
        # rise as well or the batch crosses itself.
        for prev, cur in zip(matches, matches[1:]):
            if cur.y < prev.y:
                logger.debug(
                    "rejected %r/%r: batch crosses itself at %s and %s",
                    association.a, association.b, prev, cur,
                )
                return []

        for c in matches:
            if not table.is_anchor(c) and table.crossover(c):
                logger.debug(
                    "rejected %r/%r: %s crosses an anchor",
                    association.a, association.b, c,
                )
                return []

        for c in matches:
            table.increment(c)
        return matches
