"""Shared fixtures for parallelogram tests."""

import random

import pytest

# Token mapping used to derive a "translated" text B from text A.
_LEXICON = {
    "king": "roi", "duke": "duc", "river": "fleuve", "raft": "radeau",
    "night": "nuit", "water": "eau", "boots": "bottes", "pipe": "pipe",
    "heart": "coeur", "speech": "discours", "town": "ville", "money": "argent",
}


@pytest.fixture
def cat_texts():
    """Four sentences per text; only "cat" is frequent enough to count."""
    a = [["a", "dog"], ["cat", "cat"], ["one", "bird"], ["big", "fish"]]
    b = [["un", "chien"], ["cat", "cat"], ["oiseau"], ["gros", "poisson"]]
    return a, b


@pytest.fixture
def identical_texts():
    """Sentence i holds one distinct word repeated i + 1 times."""
    text = [[f"w{i:02d}"] * (i + 1) for i in range(8)]
    return text, [list(s) for s in text]


@pytest.fixture
def disjoint_texts():
    """No word occurs often enough in either text to be considered."""
    a = [[f"a{i}", f"x{i}"] for i in range(6)]
    b = [[f"b{i}"] for i in range(5)]
    return a, b


@pytest.fixture
def translated_texts():
    """A 30-sentence text A and its word-for-word translation B.

    Each word occurs a different number of times at irregular positions, so
    only a word and its own translation share a sentence distribution.
    """
    n = 30
    a = [[] for _ in range(n)]
    for k, word in enumerate(sorted(_LEXICON)[:8]):
        for i in random.Random(k).sample(range(n), k + 2):
            a[i].append(word)
    b = [[_LEXICON[w] for w in sentence] for sentence in a]
    return a, b
