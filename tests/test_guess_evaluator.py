"""Tests for class guess evaluation."""

from rift_trainer.core.guess_evaluator import (
    classify_guess,
    evaluate_guess,
    is_exact_match,
    missed_classes,
)
from rift_trainer.data.models import ChampionClass

VANGUARD = ChampionClass.VANGUARD
CATCHER = ChampionClass.CATCHER
BURST = ChampionClass.BURST


class TestExactMatch:
    """Tests for exact match."""

    def test_order_independent(self):
        assert is_exact_match([VANGUARD, CATCHER], [CATCHER, VANGUARD])

    def test_subset_is_not_exact(self):
        assert not is_exact_match([VANGUARD, CATCHER], [VANGUARD])

    def test_superset_is_not_exact(self):
        assert not is_exact_match([BURST], [BURST, CATCHER])

    def test_wrong_class(self):
        assert not is_exact_match([BURST], [CATCHER])


class TestClassify:
    """Tests for per-class hit/miss marks."""

    def test_marks_in_guessed_order(self):
        results = classify_guess([VANGUARD, CATCHER], [BURST, CATCHER])
        assert [(r.cls, r.hit) for r in results] == [(BURST, False), (CATCHER, True)]

    def test_missed_classes(self):
        assert missed_classes([VANGUARD, CATCHER], [CATCHER]) == [VANGUARD]
        assert missed_classes([BURST], [BURST]) == []

    def test_inputs_not_mutated(self):
        actual = [VANGUARD, CATCHER]
        guessed = [CATCHER, BURST]
        evaluate_guess(actual, guessed)
        assert actual == [VANGUARD, CATCHER]
        assert guessed == [CATCHER, BURST]


class TestEvaluate:
    """Tests for the combined evaluation."""

    def test_partial_guess(self):
        result = evaluate_guess([VANGUARD, CATCHER], [VANGUARD])
        assert not result.exact_match
        assert result.hits == [VANGUARD]
        assert result.misses == []
        assert result.missed == (CATCHER,)

    def test_exact_guess(self):
        result = evaluate_guess([BURST], [BURST])
        assert result.exact_match
        assert result.missed == ()
