"""Tests for the word-to-sentence index."""

from parallelogram._index import WordSentenceIndex


def test_sentences_in_appearance_order():
    index = WordSentenceIndex([["a", "b"], ["b"], ["c", "a"]])
    assert list(index.sentences("a")) == [0, 2]
    assert list(index.sentences("b")) == [0, 1]
    assert list(index.sentences("c")) == [2]


def test_repeated_word_counts_every_occurrence():
    """A word repeated inside one sentence lists that sentence repeatedly."""
    index = WordSentenceIndex([["x", "x"], ["y"], ["x"]])
    assert list(index.sentences("x")) == [0, 0, 2]
    assert index.occurrences("x") == 3


def test_unseen_word():
    index = WordSentenceIndex([["a"]])
    assert list(index.sentences("zzz")) == []
    assert index.occurrences("zzz") == 0
    assert "zzz" not in index


def test_sentences_restartable():
    """Each call returns a fresh iterator."""
    index = WordSentenceIndex([["a"], ["a"]])
    first = index.sentences("a")
    assert list(first) == [0, 1]
    assert list(first) == []
    assert list(index.sentences("a")) == [0, 1]


def test_distinct_tokens():
    index = WordSentenceIndex([["a", "b"], [], ["b", "c"]])
    assert len(index) == 3
    assert set(index.tokens()) == {"a", "b", "c"}
    assert "b" in index


def test_non_string_tokens():
    """Any hashable token works."""
    index = WordSentenceIndex([[1, (2, 3)], [(2, 3)]])
    assert list(index.sentences((2, 3))) == [0, 1]
    assert index.occurrences(1) == 1
