"""Alignment run configuration."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


def reject_all(a: Any, b: Any) -> bool:
    """Default association mapper: never forces an association."""
    return False


@dataclass(slots=True, frozen=True)
class AlignmentConfig:
    """Thresholds and limits for one alignment run.

    Attributes:
        anchor_threshold: Score a sentence pair needs to count as an anchor
            and shape the alignable region.
        max_cycles: Maximum number of cycles before the run stops.
        word_frequency_threshold: Occurrences each word of a pair needs in
            its own text before the pair is ranked.
        word_frequency_taper: Amount subtracted from the frequency threshold
            per completed cycle.
        word_frequency_minimum: Floor for the tapered frequency threshold.
        word_similarity_threshold: Similarity a word pair needs to be ranked.
        word_similarity_taper: Amount subtracted from the similarity
            threshold per completed cycle.
        word_similarity_minimum: Floor for the tapered similarity threshold.
        min_coverage: Coverage at which the run is considered finished.
        association_mapper: Predicate over (word in A, word in B). Pairs it
            accepts get similarity 1.0 and maximal frequency, so they are
            always ranked first.
    """

    anchor_threshold: int = 3
    max_cycles: int = 20
    word_frequency_threshold: int = 5
    word_frequency_taper: int = 0
    word_frequency_minimum: int = 0
    word_similarity_threshold: float = 0.8
    word_similarity_taper: float = 0.05
    word_similarity_minimum: float = 0.3
    min_coverage: float = 0.95
    association_mapper: Callable[[Any, Any], bool] = reject_all

    def __post_init__(self) -> None:
        if self.anchor_threshold < 1:
            raise ValueError(
                f"anchor_threshold must be >= 1, got {self.anchor_threshold}"
            )
        for name in (
            "max_cycles",
            "word_frequency_threshold",
            "word_frequency_taper",
            "word_frequency_minimum",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        for name in (
            "word_similarity_threshold",
            "word_similarity_taper",
            "word_similarity_minimum",
            "min_coverage",
        ):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} must be in [0.0, 1.0], got {value}")
        if not callable(self.association_mapper):
            raise ValueError("association_mapper must be callable")

    def similarity_threshold_at(self, cycle: int) -> float:
        return max(
            self.word_similarity_minimum,
            self.word_similarity_threshold - cycle * self.word_similarity_taper,
        )

    def frequency_threshold_at(self, cycle: int) -> int:
        return max(
            self.word_frequency_minimum,
            self.word_frequency_threshold - cycle * self.word_frequency_taper,
        )

    def replace(self, **changes: Any) -> AlignmentConfig:
        """Return a copy with `changes` applied (and validated)."""
        return dataclasses.replace(self, **changes)
