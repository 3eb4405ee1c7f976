"""Tests for AlignmentConfig defaults, validation and tapering."""

import pytest

from parallelogram import AlignmentConfig, reject_all


def test_defaults():
    cfg = AlignmentConfig()
    assert cfg.anchor_threshold == 3
    assert cfg.max_cycles == 20
    assert cfg.word_frequency_threshold == 5
    assert cfg.word_frequency_taper == 0
    assert cfg.word_frequency_minimum == 0
    assert cfg.word_similarity_threshold == 0.8
    assert cfg.word_similarity_taper == 0.05
    assert cfg.word_similarity_minimum == 0.3
    assert cfg.min_coverage == 0.95
    assert cfg.association_mapper is reject_all
    assert not cfg.association_mapper("a", "a")


@pytest.mark.parametrize("field, value", [
    ("anchor_threshold", 0),
    ("max_cycles", -1),
    ("word_frequency_threshold", -1),
    ("word_frequency_taper", -2),
    ("word_frequency_minimum", -1),
    ("word_similarity_threshold", 1.5),
    ("word_similarity_taper", -0.1),
    ("word_similarity_minimum", 2.0),
    ("min_coverage", 1.01),
    ("association_mapper", "not callable"),
])
def test_invalid_values(field, value):
    with pytest.raises(ValueError, match=field):
        AlignmentConfig(**{field: value})


def test_similarity_taper():
    cfg = AlignmentConfig()
    assert cfg.similarity_threshold_at(0) == 0.8
    assert cfg.similarity_threshold_at(2) == pytest.approx(0.7)
    assert cfg.similarity_threshold_at(10) == pytest.approx(0.3)
    assert cfg.similarity_threshold_at(19) == 0.3


def test_frequency_taper():
    cfg = AlignmentConfig(
        word_frequency_threshold=5, word_frequency_taper=2,
        word_frequency_minimum=1,
    )
    assert cfg.frequency_threshold_at(0) == 5
    assert cfg.frequency_threshold_at(1) == 3
    assert cfg.frequency_threshold_at(2) == 1
    assert cfg.frequency_threshold_at(6) == 1


def test_frequency_without_taper_is_constant():
    cfg = AlignmentConfig()
    assert cfg.frequency_threshold_at(0) == cfg.frequency_threshold_at(15) == 5


def test_replace_validates():
    cfg = AlignmentConfig().replace(max_cycles=3)
    assert cfg.max_cycles == 3
    with pytest.raises(ValueError):
        cfg.replace(min_coverage=-0.5)


def test_frozen():
    cfg = AlignmentConfig()
    with pytest.raises(AttributeError):
        cfg.max_cycles = 1
