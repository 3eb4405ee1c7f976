"""Benchmark suite for the parallelogram alignment engine.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import random

import pytest

import parallelogram
from parallelogram import Coordinates, GlobalAligner
from parallelogram._association import WordAssociationScorer
from parallelogram._config import reject_all
from parallelogram._index import WordSentenceIndex
from parallelogram._region import AlignableRegion
from parallelogram._table import SentenceAlignmentTable
from parallelogram._tokenizer import Tokenizer

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Synthetic bilingual texts
# ---------------------------------------------------------------------------

RIVER_TEXT = (
    "The river rose during the night. By morning the lower town was under "
    "water, and Dr. Moreau sent the ferry across twice before noon. "
    "Nobody on the east bank had expected it! The mayor asked for boats, "
    "blankets and bread. \"We will rebuild the quay,\" he said. Two days "
    "later the water fell back to its summer level. The market reopened "
    "on Saturday, and the sun came up over a town that smelled of mud."
)


def _synthetic_pair(n_sentences: int, vocab: int = 60, seed: int = 7):
    """Text A and a token-renamed copy B with a few sentences dropped."""
    rng = random.Random(seed)
    a = [
        [f"w{rng.randrange(vocab)}" for _ in range(rng.randint(4, 12))]
        for _ in range(n_sentences)
    ]
    b = [[f"t_{w}" for w in s] for i, s in enumerate(a) if i % 17 != 5]
    return a, b


SIZES = {"small": 30, "medium": 100, "large": 250}


# ---------------------------------------------------------------------------
# 1. End-to-end alignment
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("size", list(SIZES))
def test_bench_align_e2e(benchmark, size):
    """Full align() run across text sizes."""
    a, b = _synthetic_pair(SIZES[size])
    benchmark.extra_info["n_a"] = len(a)
    benchmark.extra_info["n_b"] = len(b)
    result = benchmark.pedantic(
        parallelogram.align, args=(a, b), kwargs={"max_cycles": 5},
        rounds=3, iterations=1,
    )
    benchmark.extra_info["coverage"] = result.final_coverage


# ---------------------------------------------------------------------------
# 2. Per-phase isolation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("size", list(SIZES))
def test_bench_region_build(benchmark, size):
    """Region construction from a table with a handful of anchors."""
    n = SIZES[size]
    table = SentenceAlignmentTable(n, n, anchor_threshold=1)
    for k in range(1, 6):
        table.increment(Coordinates(k * n // 6, k * n // 6))
    region = benchmark(AlignableRegion.from_table, table)
    benchmark.extra_info["region_size"] = len(region)


def test_bench_word_index(benchmark):
    a, _ = _synthetic_pair(SIZES["large"])
    benchmark(WordSentenceIndex, a)


def _scorer(size: str) -> tuple[WordAssociationScorer, list, list]:
    a, b = _synthetic_pair(SIZES[size])
    table = SentenceAlignmentTable(len(a), len(b), anchor_threshold=3)
    region = AlignableRegion.from_table(table)
    scorer = WordAssociationScorer(
        region, a, b,
        WordSentenceIndex(a), WordSentenceIndex(b),
        reject_all,
    )
    return scorer, a, b


def test_bench_similarity(benchmark):
    """Similarity of one word pair on a medium text."""
    scorer, _, _ = _scorer("medium")
    benchmark(scorer.similarity, "w3", "t_w3")


def test_bench_build_table(benchmark):
    """One cycle's association table on a small text."""
    scorer, _, _ = _scorer("small")
    table = benchmark(scorer.build_table, 0.5, 2)
    benchmark.extra_info["associations"] = len(table)


# ---------------------------------------------------------------------------
# 3. Sequence alignment primitive
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("length", [10, 100, 400])
def test_bench_global_score(benchmark, length):
    rng = random.Random(length)
    a = [rng.randrange(8) for _ in range(length)]
    b = [rng.randrange(8) for _ in range(length)]
    benchmark(GlobalAligner().score, a, b)


@pytest.mark.parametrize("length", [10, 100])
def test_bench_global_align(benchmark, length):
    rng = random.Random(length)
    a = [rng.randrange(8) for _ in range(length)]
    b = [rng.randrange(8) for _ in range(length)]
    benchmark(GlobalAligner().align, a, b)


# ---------------------------------------------------------------------------
# 4. Tokenization
# ---------------------------------------------------------------------------


def test_bench_tokenize_text(benchmark):
    tok = Tokenizer(compounds=["lower town", "east bank"])
    benchmark(tok.tokenize_text, RIVER_TEXT)


def test_bench_stemmer(benchmark):
    """Snowball stemmer on a single word."""
    import Stemmer

    stemmer = Stemmer.Stemmer("english")
    benchmark.pedantic(
        stemmer.stemWord, args=("overboard",), rounds=1000, iterations=1000,
    )
