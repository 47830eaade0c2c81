"""Trainer session lifecycle shared by both trainers.

not_started -> in_progress -> finished, with restart going back to
not_started from anywhere.
"""

import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from rift_trainer.core.filters import FilterState
from rift_trainer.core.queue_builder import QueueItem
from rift_trainer.data.catalog import Catalog


class TrainerError(ValueError):
    """Base error for trainer operations."""


class SessionStateError(TrainerError):
    """Operation not allowed in the session's current state."""


class EmptyQueueError(TrainerError):
    """The filters leave nothing to train on."""


class InvalidGuessError(TrainerError):
    """A class guess was empty, too large or named unknown classes."""


class SessionStatus(Enum):
    """Trainer session states."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class TrainerSession(ABC):
    """Queue, position and lifecycle for one trainer session."""

    def __init__(
        self,
        catalog: Catalog,
        filters: Optional[FilterState] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a session.

        Args:
            catalog: Reference data to draw champions and abilities from.
            filters: Enabled classes/slots. Defaults to everything enabled.
            rng: Random source for queue shuffles.
        """
        self.catalog = catalog
        self.filters = filters or FilterState()
        self.rng = rng or random.Random()
        self.status = SessionStatus.NOT_STARTED
        self.queue: list[QueueItem] = []
        self.index = 0
        self._reset()

    # --- queue ---

    @abstractmethod
    def build_queue(self) -> list[QueueItem]:
        """Build a fresh queue from the current filters."""
        pass

    @property
    @abstractmethod
    def can_start(self) -> bool:
        """Whether the current filters select anything at all."""
        pass

    @property
    def current_item(self) -> Optional[QueueItem]:
        if self.status != SessionStatus.IN_PROGRESS or not self.queue:
            return None
        return self.queue[self.index]

    @property
    def has_data(self) -> bool:
        """False when there is nothing to show: empty catalog, or empty filters."""
        if self.catalog.is_empty:
            return False
        if self.status == SessionStatus.IN_PROGRESS:
            return self.current_item is not None
        return self.can_start

    # --- transitions ---

    def start(self) -> None:
        """Build a fresh queue and reset session state.

        Raises:
            EmptyQueueError: the filters select nothing.
        """
        queue = self.build_queue()
        if not queue:
            raise EmptyQueueError("Nothing matches the selected filters.")
        self._reset()
        self.queue = queue
        self.index = 0
        self.status = SessionStatus.IN_PROGRESS

    def finish(self) -> None:
        """End the session early, keeping score and history."""
        self._require_in_progress()
        self.status = SessionStatus.FINISHED

    def restart(self) -> None:
        """Back to not started, discarding everything session-local."""
        self._reset()
        self.queue = []
        self.index = 0
        self.status = SessionStatus.NOT_STARTED

    def _reset(self) -> None:
        """Clear per-session counters. Subclasses extend this."""

    def _require_in_progress(self) -> None:
        if self.status != SessionStatus.IN_PROGRESS:
            raise SessionStateError(f"Session is {self.status.value}, not in progress.")
