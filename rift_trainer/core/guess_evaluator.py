"""Class guess evaluation.

Pure functions: inputs are never mutated and no guess size is assumed.
"""

from dataclasses import dataclass
from typing import Sequence

from rift_trainer.data.models import ChampionClass


@dataclass(frozen=True)
class ClassGuessResult:
    """Whether one guessed class belongs to the champion."""

    cls: ChampionClass
    hit: bool


@dataclass(frozen=True)
class GuessResult:
    """Outcome of one submitted guess."""

    results: tuple[ClassGuessResult, ...]
    exact_match: bool
    missed: tuple[ChampionClass, ...]  # Actual classes the guess left out

    @property
    def hits(self) -> list[ChampionClass]:
        return [r.cls for r in self.results if r.hit]

    @property
    def misses(self) -> list[ChampionClass]:
        return [r.cls for r in self.results if not r.hit]


def is_exact_match(actual: Sequence[ChampionClass], guessed: Sequence[ChampionClass]) -> bool:
    """Same classes, same count, any order."""
    if len(actual) != len(guessed):
        return False
    return sorted(actual) == sorted(guessed)


def classify_guess(
    actual: Sequence[ChampionClass], guessed: Sequence[ChampionClass]
) -> list[ClassGuessResult]:
    """Mark each guessed class as a hit or a miss, in guessed order."""
    return [ClassGuessResult(cls=cls, hit=cls in actual) for cls in guessed]


def missed_classes(
    actual: Sequence[ChampionClass], guessed: Sequence[ChampionClass]
) -> list[ChampionClass]:
    """Actual classes that were never guessed."""
    return [cls for cls in actual if cls not in guessed]


def evaluate_guess(actual: Sequence[ChampionClass], guessed: Sequence[ChampionClass]) -> GuessResult:
    return GuessResult(
        results=tuple(classify_guess(actual, guessed)),
        exact_match=is_exact_match(actual, guessed),
        missed=tuple(missed_classes(actual, guessed)),
    )
