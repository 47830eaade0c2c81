"""Class trainer session.

The player is shown a champion and picks up to two classes. A correct
guess moves on to the next champion; a wrong one stays on the same
champion, with the classes already tried shown as hit/miss hints.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from rift_trainer.core.constants import MAX_SELECTED_CLASSES
from rift_trainer.core.guess_evaluator import ClassGuessResult, GuessResult, evaluate_guess
from rift_trainer.core.queue_builder import QueueItem, build_champion_queue, shuffle
from rift_trainer.core.session import (
    InvalidGuessError,
    SessionStatus,
    TrainerSession,
)
from rift_trainer.data.models import ChampionClass, GameChampion


@dataclass(frozen=True)
class HistoryEntry:
    """One submitted guess."""

    champion: GameChampion
    guess_results: tuple[ClassGuessResult, ...]
    exact_match: bool


@dataclass(frozen=True)
class MissedChampion:
    """A champion that was not solved on the first attempt."""

    champion: GameChampion
    actual_classes: tuple[ChampionClass, ...]


class ClassTrainerSession(TrainerSession):
    """Guess-the-class session over the filtered champion list."""

    def _reset(self) -> None:
        self.score = 0
        self.total_attempted = 0
        self.attempts_on_current = 0
        self.rounds_completed = 0
        self.history: list[HistoryEntry] = []
        self.missed: list[MissedChampion] = []
        self.selected: list[ChampionClass] = []
        self.discarded: set[ChampionClass] = set()
        self.last_result: Optional[GuessResult] = None

    def eligible_champions(self) -> list[GameChampion]:
        return self.catalog.champions_with_classes(self.filters.enabled_classes)

    @property
    def can_start(self) -> bool:
        return not self.filters.is_empty() and bool(self.eligible_champions())

    def build_queue(self) -> list[QueueItem]:
        return build_champion_queue(self.eligible_champions(), self.rng, patch=self.catalog.version)

    @property
    def current_champion(self) -> Optional[GameChampion]:
        item = self.current_item
        return item.champion if item else None

    # --- selection ---

    def toggle_selection(self, cls: ChampionClass) -> bool:
        """Add or remove a class from the pending guess.

        A third class, or a discarded one, is not added.

        Returns:
            Whether the class is selected afterwards.
        """
        self._require_in_progress()
        if cls in self.selected:
            self.selected.remove(cls)
            return False
        if cls in self.discarded or len(self.selected) >= MAX_SELECTED_CLASSES:
            return False
        self.selected.append(cls)
        return True

    def toggle_discard(self, cls: ChampionClass) -> bool:
        """Mark a class as ruled out for the current champion, or unmark it.

        Returns:
            Whether the class is discarded afterwards.
        """
        self._require_in_progress()
        if cls in self.discarded:
            self.discarded.discard(cls)
            return False
        self.discarded.add(cls)
        if cls in self.selected:
            self.selected.remove(cls)
        return True

    # --- guessing ---

    def submit_guess(self, classes: Optional[Iterable[ChampionClass]] = None) -> GuessResult:
        """Evaluate a guess for the current champion.

        Args:
            classes: The guess; defaults to the current selection.

        Returns:
            The evaluated guess.

        Raises:
            SessionStateError: the session is not in progress.
            InvalidGuessError: the guess is empty or has too many classes.
        """
        self._require_in_progress()
        guess = self._normalize_guess(self.selected if classes is None else classes)
        champion = self.current_champion
        if champion is None:
            raise InvalidGuessError("No champion to guess.")

        result = evaluate_guess(champion.classes, guess)
        self.history.append(
            HistoryEntry(champion=champion, guess_results=result.results, exact_match=result.exact_match)
        )
        self.last_result = result

        if result.exact_match:
            if self.attempts_on_current == 0:
                self.score += 1
            else:
                self.missed.append(MissedChampion(champion=champion, actual_classes=champion.classes))
            self.total_attempted += 1
            self._advance()
        else:
            self.attempts_on_current += 1
            self.selected = []
        return result

    @staticmethod
    def _normalize_guess(classes: Iterable[ChampionClass]) -> list[ChampionClass]:
        guess: list[ChampionClass] = []
        for value in classes:
            cls = value if isinstance(value, ChampionClass) else ChampionClass.parse(str(value))
            if cls is None:
                raise InvalidGuessError(f"Unknown class: {value}")
            if cls not in guess:
                guess.append(cls)
        if not guess:
            raise InvalidGuessError("Select at least one class.")
        if len(guess) > MAX_SELECTED_CLASSES:
            raise InvalidGuessError(f"Select at most {MAX_SELECTED_CLASSES} classes.")
        return guess

    def _advance(self) -> None:
        """Move to the next champion, reshuffling after the last one."""
        self.attempts_on_current = 0
        self.selected = []
        self.discarded = set()
        if self.index + 1 < len(self.queue):
            self.index += 1
            return

        previous = [item.champion.id for item in self.queue]
        reshuffled = shuffle(self.queue, self.rng)
        while len(reshuffled) > 1 and [item.champion.id for item in reshuffled] == previous:
            reshuffled = shuffle(self.queue, self.rng)
        self.queue = reshuffled
        self.index = 0
        self.rounds_completed += 1

    # --- display helpers ---

    def hints(self) -> dict[ChampionClass, bool]:
        """Classes already tried on the current champion, mapped to hit/miss.

        Built from the last ``attempts_on_current`` history entries, later
        guesses taking precedence.
        """
        hints: dict[ChampionClass, bool] = {}
        if self.attempts_on_current == 0:
            return hints
        for entry in self.history[-self.attempts_on_current:]:
            for result in entry.guess_results:
                hints[result.cls] = result.hit
        return hints

    def recent_history(self, limit: int = 10) -> list[HistoryEntry]:
        """Most recent guesses, newest first."""
        return list(reversed(self.history[-limit:])) if limit > 0 else []

    @property
    def accuracy(self) -> Optional[float]:
        """Share of champions solved on the first attempt."""
        if self.total_attempted == 0:
            return None
        return self.score / self.total_attempted

    @property
    def is_finished(self) -> bool:
        return self.status == SessionStatus.FINISHED
