"""Persisted skills review history.

An append-only log of self-ratings kept as a JSON array in one named
storage slot. Records are never edited; the log only grows until it is
explicitly cleared.
"""

import json
import logging
import math
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Iterable, Optional

from rift_trainer.core.constants import HISTORY_STORAGE_KEY, RATING_POINTS
from rift_trainer.core.storage import LocalStorage
from rift_trainer.data.models import AbilitySlot


logger = logging.getLogger(__name__)


class Rating(StrEnum):
    """How well the player recalled an ability."""

    NAILED = "nailed"
    PARTIAL = "partial"
    NO_IDEA = "no_idea"

    @property
    def points(self) -> int:
        return RATING_POINTS[self.value]


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class SkillReviewRecord:
    """One self-rating of one ability."""

    champion_id: str
    champion_name: str
    ability_key: AbilitySlot
    ability_name: str
    rating: Rating
    timestamp: int  # Epoch milliseconds

    def to_dict(self) -> dict[str, Any]:
        return {
            "championId": self.champion_id,
            "championName": self.champion_name,
            "abilityKey": self.ability_key.value,
            "abilityName": self.ability_name,
            "rating": self.rating.value,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SkillReviewRecord":
        """Parse a stored record.

        Raises:
            KeyError, TypeError or ValueError for malformed input.
        """
        timestamp = data["timestamp"]
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise TypeError(f"invalid timestamp {timestamp!r}")
        if not math.isfinite(timestamp):
            raise ValueError(f"non-finite timestamp {timestamp!r}")
        return cls(
            champion_id=str(data["championId"]),
            champion_name=str(data["championName"]),
            ability_key=AbilitySlot(data["abilityKey"]),
            ability_name=str(data["abilityName"]),
            rating=Rating(data["rating"]),
            timestamp=int(timestamp),
        )


class HistoryStore:
    """Review history persisted in one storage slot."""

    def __init__(self, storage: LocalStorage, key: str = HISTORY_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> list[SkillReviewRecord]:
        """Return every record in append order.

        Absent, unparsable or non-array content reads as an empty history.
        Individual malformed entries are skipped.
        """
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError as e:
            logger.warning("Discarding unreadable review history in %r: %s", self.key, e)
            return []
        if not isinstance(parsed, list):
            logger.warning("Review history in %r is not a list, treating as empty", self.key)
            return []

        records = []
        for entry in parsed:
            try:
                records.append(SkillReviewRecord.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                logger.debug("Skipping malformed review record %r: %s", entry, e)
        return records

    def append(self, records: Iterable[SkillReviewRecord]) -> None:
        """Append a batch of records after the existing ones."""
        batch = list(records)
        if not batch:
            return
        merged = self.load() + batch
        self.storage.set_item(self.key, json.dumps([r.to_dict() for r in merged]))
        logger.debug("Appended %d review records (%d total)", len(batch), len(merged))

    def clear(self, confirm: bool = False) -> None:
        """Delete all records. Irreversible, so ``confirm`` must be True."""
        if not confirm:
            raise ValueError("Clearing review history requires confirmation.")
        self.storage.remove_item(self.key)
        logger.info("Review history cleared")

    def count(self) -> int:
        return len(self.load())


def filter_records(
    records: Iterable[SkillReviewRecord],
    champion_id: Optional[str] = None,
    slot: Optional[AbilitySlot] = None,
) -> list[SkillReviewRecord]:
    """Records for one champion and/or one ability slot."""
    return [
        r
        for r in records
        if (champion_id is None or r.champion_id == champion_id)
        and (slot is None or r.ability_key == slot)
    ]


def newest_first(records: Iterable[SkillReviewRecord]) -> list[SkillReviewRecord]:
    return sorted(records, key=lambda r: r.timestamp, reverse=True)
