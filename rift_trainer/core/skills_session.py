"""Skills trainer session.

The player sees an ability, tries to recall what it does, reveals the
answer and rates their recall. Every rating advances the queue; there is
no retry. Ratings are appended to the review history as they happen.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from rift_trainer.core.filters import FilterState
from rift_trainer.core.history_store import HistoryStore, Rating, SkillReviewRecord, now_ms
from rift_trainer.core.mastery import compute_mastery
from rift_trainer.core.queue_builder import QueueItem, QueueOrder, build_ability_queue
from rift_trainer.core.session import SessionStateError, SessionStatus, TrainerSession
from rift_trainer.data.catalog import Catalog


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillsSummary:
    """Ratings given during one session."""

    reviewed: int
    remaining: int
    nailed: int
    partial: int
    no_idea: int
    mastery: Optional[int]


class SkillsTrainerSession(TrainerSession):
    """Recall-and-rate session over (champion, ability) pairs."""

    def __init__(
        self,
        catalog: Catalog,
        history_store: Optional[HistoryStore] = None,
        filters: Optional[FilterState] = None,
        order: QueueOrder = QueueOrder.GROUPED,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = now_ms,
    ):
        """
        Initialize a skills session.

        Args:
            catalog: Reference data.
            history_store: Where ratings are persisted; None keeps them
                session-local only.
            filters: Enabled classes and ability slots.
            order: Grouped by champion or interleaved.
            rng: Random source for queue shuffles.
            clock: Millisecond timestamp source for records.
        """
        self.history_store = history_store
        self.order = order
        self.clock = clock
        super().__init__(catalog, filters, rng)

    def _reset(self) -> None:
        self.records: list[SkillReviewRecord] = []
        self.revealed = False

    @property
    def can_start(self) -> bool:
        if self.filters.is_empty(needs_slots=True):
            return False
        slots = self.filters.enabled_slots
        for champion in self.catalog.champions_with_classes(self.filters.enabled_classes):
            for slot in slots:
                if self.catalog.get_ability(champion.id, slot) is not None:
                    return True
        return False

    def build_queue(self) -> list[QueueItem]:
        return build_ability_queue(
            self.catalog.champions_with_classes(self.filters.enabled_classes),
            self.filters.enabled_slots,
            self.catalog.get_spell_set,
            order=self.order,
            rng=self.rng,
            patch=self.catalog.spells_version,
        )

    def reveal(self) -> QueueItem:
        """Show the answer for the current ability."""
        self._require_in_progress()
        self.revealed = True
        return self.queue[self.index]

    def submit_rating(self, rating: Rating) -> SkillReviewRecord:
        """Record a self-rating and move on.

        The session finishes after the last item is rated.

        Raises:
            SessionStateError: the session is not in progress.
        """
        self._require_in_progress()
        item = self.queue[self.index]
        if item.ability is None:
            raise SessionStateError("Current item has no ability to rate.")

        record = SkillReviewRecord(
            champion_id=item.champion.id,
            champion_name=item.champion.name,
            ability_key=item.ability.slot,
            ability_name=item.ability.name,
            rating=Rating(rating),
            timestamp=self.clock(),
        )
        self.records.append(record)
        if self.history_store is not None:
            self.history_store.append([record])

        self.revealed = False
        if self.index + 1 < len(self.queue):
            self.index += 1
        else:
            self.status = SessionStatus.FINISHED
            logger.info("Skills session finished after %d ratings", len(self.records))
        return record

    @property
    def remaining(self) -> int:
        if self.status != SessionStatus.IN_PROGRESS:
            return 0
        return len(self.queue) - self.index

    def summary(self) -> SkillsSummary:
        counts = {rating: 0 for rating in Rating}
        for record in self.records:
            counts[record.rating] += 1
        return SkillsSummary(
            reviewed=len(self.records),
            remaining=self.remaining,
            nailed=counts[Rating.NAILED],
            partial=counts[Rating.PARTIAL],
            no_idea=counts[Rating.NO_IDEA],
            mastery=compute_mastery(self.records),
        )
