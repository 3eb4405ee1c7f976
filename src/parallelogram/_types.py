"""Data structures for parallelogram."""

from __future__ import annotations

import sys
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TypeVar

Word = TypeVar("Word", bound=Hashable)

# Occurrence count given to both sides of a forced association.
FORCED_OCCURRENCES: int = sys.maxsize


@dataclass(slots=True, frozen=True, order=True)
class Coordinates:
    x: int  # sentence index in text B
    y: int  # sentence index in text A


ORIGIN = Coordinates(0, 0)


@dataclass(slots=True, frozen=True)
class WordAssociation:
    a: Hashable
    b: Hashable
    similarity: float   # Dice-style score in [0, 1]
    a_occurrences: int  # occurrences of `a` in text A
    b_occurrences: int  # occurrences of `b` in text B

    @property
    def forced(self) -> bool:
        return (
            self.a_occurrences == FORCED_OCCURRENCES
            and self.b_occurrences == FORCED_OCCURRENCES
        )

    @property
    def rank_key(self) -> tuple:
        """Sort key; larger keys are processed first."""
        return (
            self.similarity,
            self.a_occurrences + self.b_occurrences,
            self.a,
            self.b,
        )


@dataclass(slots=True, frozen=True)
class AlignmentResult:
    """Immutable outcome of one alignment run.

    `anchors` holds the final anchor coordinates in (x, y) order and
    `coverage` the coverage reached after each completed cycle.
    """

    n_a: int
    n_b: int
    anchors: tuple[Coordinates, ...]
    coverage: tuple[float, ...]
    _a_lookup: dict[int, tuple[int, ...]] = field(
        init=False, repr=False, compare=False,
    )
    _b_lookup: dict[int, tuple[int, ...]] = field(
        init=False, repr=False, compare=False,
    )

    def __post_init__(self) -> None:
        a_lookup: dict[int, list[int]] = {}
        b_lookup: dict[int, list[int]] = {}
        for c in sorted(self.anchors):
            a_lookup.setdefault(c.y, []).append(c.x)
            b_lookup.setdefault(c.x, []).append(c.y)
        object.__setattr__(
            self, "_a_lookup",
            {y: tuple(sorted(xs)) for y, xs in a_lookup.items()},
        )
        object.__setattr__(
            self, "_b_lookup",
            {x: tuple(sorted(ys)) for x, ys in b_lookup.items()},
        )

    @classmethod
    def from_anchors(
        cls,
        n_a: int,
        n_b: int,
        anchors: Iterable[Coordinates],
        coverage: Iterable[float],
    ) -> AlignmentResult:
        return cls(
            n_a=n_a,
            n_b=n_b,
            anchors=tuple(sorted(anchors)),
            coverage=tuple(coverage),
        )

    @property
    def cycles(self) -> int:
        """Number of cycles the run completed."""
        return len(self.coverage)

    @property
    def final_coverage(self) -> float:
        return self.coverage[-1] if self.coverage else 0.0

    def a_alignments(self, i: int) -> tuple[int, ...]:
        """Return the text B sentence indices aligned to sentence `i` of text A."""
        return self._a_lookup.get(i, ())

    def b_alignments(self, j: int) -> tuple[int, ...]:
        """Return the text A sentence indices aligned to sentence `j` of text B."""
        return self._b_lookup.get(j, ())

    def pairs(self) -> Iterator[tuple[int, int]]:
        """Yield (a_index, b_index) pairs ordered by text A, then text B."""
        for y in sorted(self._a_lookup):
            for x in self._a_lookup[y]:
                yield y, x

    def to_bytes(self) -> bytes:
        from ._storage import dumps

        return dumps(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> AlignmentResult:
        from ._storage import loads

        return loads(data)
