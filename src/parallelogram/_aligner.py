"""Aligner: iterative sentence alignment driven by word co-occurrence."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any

from ._association import WordAssociationScorer
from ._config import AlignmentConfig
from ._errors import EmptyTextError
from ._index import WordSentenceIndex
from ._region import AlignableRegion
from ._table import SentenceAlignmentTable
from ._types import AlignmentResult

logger = logging.getLogger(__name__)


def _as_words(sentence: Any) -> tuple[Hashable, ...]:
    """Normalize one sentence to a tuple of tokens.

    Accepts any iterable of tokens, or an object exposing `words()`.
    """
    words = getattr(sentence, "words", None)
    if callable(words):
        return tuple(words())
    if isinstance(sentence, (str, bytes)):
        raise TypeError(
            "sentences must be sequences of tokens, not raw strings; "
            "tokenize them first (see parallelogram.Tokenizer)"
        )
    return tuple(sentence)


class Aligner:
    """Main alignment engine. Holds the configuration and runs alignments."""

    __slots__ = ("_config",)

    def __init__(self, config: AlignmentConfig | None = None, **options: Any) -> None:
        if config is None:
            config = AlignmentConfig(**options)
        elif options:
            config = config.replace(**options)
        self._config = config

    @property
    def config(self) -> AlignmentConfig:
        return self._config

    def align(self, a: Iterable[Any], b: Iterable[Any]) -> AlignmentResult:
        """Align the sentences of text `a` with those of text `b`.

        Each cycle rebuilds the alignable region from the current anchors,
        ranks the word pairs found inside it and lets them reinforce the
        sentence pairs they uniquely explain. The run stops once coverage
        reaches `min_coverage` or after `max_cycles` cycles.

        Raises:
            EmptyTextError: If either text holds no sentences.
        """
        a_words = [_as_words(s) for s in a]
        b_words = [_as_words(s) for s in b]
        if not a_words or not b_words:
            raise EmptyTextError(
                f"both texts need at least one sentence, "
                f"got {len(a_words)} and {len(b_words)}"
            )

        cfg = self._config
        a_index = WordSentenceIndex(a_words)
        b_index = WordSentenceIndex(b_words)
        table = SentenceAlignmentTable(
            len(a_words), len(b_words), cfg.anchor_threshold,
        )

        n_sentences = len(a_words) + len(b_words)
        a_aligned: set[int] = set()
        b_aligned: set[int] = set()
        coverage = 0.0
        coverage_report: list[float] = []
        cycle = 0

        while coverage < cfg.min_coverage and cycle < cfg.max_cycles:
            region = AlignableRegion.from_table(table)
            similarity_threshold = cfg.similarity_threshold_at(cycle)
            frequency_threshold = cfg.frequency_threshold_at(cycle)

            scorer = WordAssociationScorer(
                region, a_words, b_words, a_index, b_index,
                cfg.association_mapper,
            )
            wat = scorer.build_table(similarity_threshold, frequency_threshold)

            promoted = 0
            for association in wat:
                for c in scorer.align_sentences(association, table):
                    a_aligned.add(c.y)
                    b_aligned.add(c.x)
                    promoted += 1

            cycle += 1
            coverage = (len(a_aligned) + len(b_aligned)) / n_sentences
            coverage_report.append(coverage)
            logger.debug(
                "cycle %d: similarity>=%.3f frequency>=%d region=%d "
                "associations=%d promoted=%d coverage=%.4f",
                cycle, similarity_threshold, frequency_threshold,
                len(region), len(wat), promoted, coverage,
            )

        result = AlignmentResult.from_anchors(
            len(a_words), len(b_words), table.anchors(), coverage_report,
        )
        logger.info(
            "aligned %d x %d sentences in %d cycles: coverage=%.4f anchors=%d",
            result.n_a, result.n_b, result.cycles,
            result.final_coverage, len(result.anchors),
        )
        return result
