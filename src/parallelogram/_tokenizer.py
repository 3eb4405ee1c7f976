"""Compound scan (Aho-Corasick) and tokenize/stem pipeline for raw text."""

from __future__ import annotations

import re
from collections.abc import Iterable

import ahocorasick
import Stemmer

from ._sentence import DEFAULT_ABBREVIATIONS, split_sentences

_WORD_RE = re.compile(r"[^\W_]+")


def _normalize_compound(compound: str) -> str:
    return " ".join(compound.lower().split())


class Tokenizer:
    """Turn raw sentences into tuples of normalized tokens.

    Tokens are lowercased runs of letters and digits, reduced with the
    Snowball stemmer for `language`. Multi-word `compounds` are matched
    first and emitted as single tokens with spaces replaced by underscores.
    """

    __slots__ = ("_language", "_stemmer", "_compounds", "_compound_ac")

    def __init__(
        self,
        language: str = "english",
        *,
        stem: bool = True,
        compounds: Iterable[str] = (),
    ) -> None:
        self._language = language
        self._stemmer = None
        if stem:
            try:
                self._stemmer = Stemmer.Stemmer(language)
            except KeyError as e:
                raise ValueError(
                    f"no Snowball stemmer for language {language!r}"
                ) from e
        self._compounds: list[str] = []
        self._compound_ac: ahocorasick.Automaton | None = None
        self.add_compounds(compounds)

    @property
    def language(self) -> str:
        return self._language

    @property
    def compounds(self) -> tuple[str, ...]:
        return tuple(self._compounds)

    def add_compounds(self, compounds: Iterable[str]) -> None:
        """Register multi-word compounds and rebuild the automaton."""
        seen = set(self._compounds)
        for compound in compounds:
            normalized = _normalize_compound(compound)
            if " " not in normalized:
                raise ValueError(
                    f"compound must contain at least two words, got {compound!r}"
                )
            if normalized not in seen:
                seen.add(normalized)
                self._compounds.append(normalized)

        if not self._compounds:
            self._compound_ac = None
            return
        ac = ahocorasick.Automaton()
        for idx, compound in enumerate(self._compounds):
            ac.add_word(compound, idx)
        ac.make_automaton()
        self._compound_ac = ac

    def scan_compounds(self, text_lower: str) -> list[tuple[int, int, str]]:
        """Find compounds in lowercased text.

        Returns (start, end, token) triples for leftmost-longest,
        non-overlapping matches that begin and end on word boundaries.
        """
        if self._compound_ac is None:
            return []

        raw_matches: list[tuple[int, int, int]] = []
        for end_inclusive, idx in self._compound_ac.iter(text_lower):
            end = end_inclusive + 1
            start = end - len(self._compounds[idx])
            if start > 0 and text_lower[start - 1].isalnum():
                continue
            if end < len(text_lower) and text_lower[end].isalnum():
                continue
            raw_matches.append((start, end, idx))

        # Sort by start position, then by length descending (longest first)
        raw_matches.sort(key=lambda m: (m[0], -(m[1] - m[0])))

        spans: list[tuple[int, int, str]] = []
        last_end = -1
        for start, end, idx in raw_matches:
            if start >= last_end:
                spans.append((start, end, self._compounds[idx].replace(" ", "_")))
                last_end = end
        return spans

    def _normalize(self, token: str) -> str:
        if self._stemmer is None:
            return token
        return self._stemmer.stemWord(token)

    def tokenize(self, sentence: str) -> tuple[str, ...]:
        """Tokenize one sentence."""
        text_lower = sentence.lower()
        spans = self.scan_compounds(text_lower)

        positioned: list[tuple[int, str]] = [
            (start, token) for start, _, token in spans
        ]
        span_idx = 0
        for m in _WORD_RE.finditer(text_lower):
            # Advance past spans that end before this word.
            while span_idx < len(spans) and spans[span_idx][1] <= m.start():
                span_idx += 1
            if (
                span_idx < len(spans)
                and spans[span_idx][0] <= m.start()
                and m.end() <= spans[span_idx][1]
            ):
                continue
            positioned.append((m.start(), self._normalize(m.group())))

        positioned.sort(key=lambda p: p[0])
        return tuple(token for _, token in positioned)

    def tokenize_text(
        self,
        text: str,
        abbreviations: Iterable[str] = DEFAULT_ABBREVIATIONS,
    ) -> list[tuple[str, ...]]:
        """Split raw text into sentences and tokenize each of them."""
        return [
            self.tokenize(s) for s in split_sentences(text, abbreviations)
        ]
