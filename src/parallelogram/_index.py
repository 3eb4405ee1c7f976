"""Word-to-sentence index for one text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic

from ._types import Word


class WordSentenceIndex(Generic[Word]):
    """Map each token to the indices of the sentences that contain it.

    Indices are recorded in appearance order, once per occurrence, so a token
    repeated inside one sentence lists that sentence repeatedly and counts
    every repetition in `occurrences`.
    """

    __slots__ = ("_map",)

    def __init__(self, text: Iterable[Iterable[Word]]) -> None:
        index: dict[Word, list[int]] = {}
        for i, sentence in enumerate(text):
            for word in sentence:
                index.setdefault(word, []).append(i)
        self._map = index

    def sentences(self, word: Word) -> Iterator[int]:
        return iter(self._map.get(word, ()))

    def occurrences(self, word: Word) -> int:
        return len(self._map.get(word, ()))

    def tokens(self) -> Iterator[Word]:
        return iter(self._map)

    def __contains__(self, word: object) -> bool:
        return word in self._map

    def __len__(self) -> int:
        return len(self._map)
