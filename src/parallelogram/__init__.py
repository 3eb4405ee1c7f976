"""Parallelogram: unsupervised sentence alignment of bilingual texts."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ._aligner import Aligner
from ._config import AlignmentConfig, reject_all
from ._errors import (
    EmptyTextError,
    ParallelogramChecksumError,
    ParallelogramError,
    ParallelogramVersionError,
)
from ._sentence import DEFAULT_ABBREVIATIONS, split_sentences
from ._sequence import Alignment, GlobalAligner
from ._storage import load, save
from ._types import AlignmentResult, Coordinates, WordAssociation

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "align",
    "load",
    "save",
    "Aligner",
    "Alignment",
    "AlignmentConfig",
    "AlignmentResult",
    "Coordinates",
    "DEFAULT_ABBREVIATIONS",
    "EmptyTextError",
    "GlobalAligner",
    "ParallelogramChecksumError",
    "ParallelogramError",
    "ParallelogramVersionError",
    "Tokenizer",
    "WordAssociation",
    "reject_all",
    "split_sentences",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def align(
    a: Iterable[Any],
    b: Iterable[Any],
    config: AlignmentConfig | None = None,
    **options: Any,
) -> AlignmentResult:
    """Align two tokenized texts and return the resulting AlignmentResult.

    Args:
        a: Sentences of text A, each an iterable of tokens.
        b: Sentences of text B, each an iterable of tokens.
        config: Run configuration. Defaults to AlignmentConfig().
        **options: AlignmentConfig fields overriding `config`.
    """
    return Aligner(config, **options).align(a, b)


# Deferred import so the stemmer and Aho-Corasick extensions only load
# when raw-text tokenization is actually used.
def __getattr__(name: str):
    if name == "Tokenizer":
        from ._tokenizer import Tokenizer
        return Tokenizer
    raise AttributeError(f"module 'parallelogram' has no attribute {name!r}")
