"""Lightweight regex-based sentence splitter for raw text."""

from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_ABBREVIATIONS: frozenset[str] = frozenset({
    # English
    "mr", "mrs", "ms", "dr", "st", "jr", "sr", "prof", "gen", "rev",
    "inc", "ltd", "corp", "vs", "etc", "no", "vol", "fig", "cf",
    # French / German / Spanish
    "mme", "mlle", "cie", "bzw", "usw", "vgl", "nr", "sra", "sta",
})

# Terminal punctuation, optional closing quotes or brackets, then whitespace.
_BOUNDARY_RE = re.compile(r"[.!?…]+[\"'»”’)\]]*\s+")
_LAST_WORD_RE = re.compile(r"(\w+)[.!?…]*[\"'»”’)\]]*\s*$")
_OPENERS = "\"'«“‘([¿¡"


def _starts_sentence(ch: str) -> bool:
    return ch.isupper() or ch.isdigit() or ch in _OPENERS


def split_sentences(
    text: str, abbreviations: Iterable[str] = DEFAULT_ABBREVIATIONS,
) -> list[str]:
    """Split text into sentences using punctuation and capitalization.

    A boundary is terminal punctuation followed by whitespace and a capital
    letter, digit or opening quote. Boundaries after a known abbreviation
    (compared case-insensitively) or a single-letter initial are ignored.
    """
    text = text.strip()
    if not text:
        return []

    abbrevs = {a.lower() for a in abbreviations}
    sentences: list[str] = []
    start = 0
    for m in _BOUNDARY_RE.finditer(text):
        end = m.end()
        if end >= len(text) or not _starts_sentence(text[end]):
            continue
        if text[m.start()] == ".":
            last = _LAST_WORD_RE.search(text, start, m.end())
            if last is not None:
                word = last.group(1)
                if word.lower() in abbrevs or (len(word) == 1 and word.isalpha()):
                    continue
        s = text[start:m.end()].strip()
        if s:
            sentences.append(s)
        start = end

    tail = text[start:].strip()
    if tail:
        sentences.append(tail)
    return sentences
