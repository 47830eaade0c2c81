"""Mastery aggregation over review records.

Mastery is never stored. It is recomputed from whatever subset of records
the caller passes in, and is None (not 0) when there are no records.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from rift_trainer.core.constants import (
    ABILITY_SLOTS,
    MASTERY_HIGH,
    MASTERY_MEDIUM,
    MAX_RATING_POINTS,
    RECENT_RATINGS_PER_ABILITY,
)
from rift_trainer.core.history_store import SkillReviewRecord, filter_records, newest_first
from rift_trainer.data.models import AbilitySlot


class MasteryTier(Enum):
    """Badge level for a mastery value."""

    NO_DATA = "no_data"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def compute_mastery(records: Iterable[SkillReviewRecord]) -> Optional[int]:
    """Percentage of the best possible score, rounded half up.

    Returns:
        0-100, or None when there are no records.
    """
    records = list(records)
    count = len(records)
    if count == 0:
        return None
    points = sum(r.rating.points for r in records)
    # floor(100 * points / (max * count) + 1/2) in integer arithmetic
    denominator = MAX_RATING_POINTS * count
    return (200 * points + denominator) // (2 * denominator)


def mastery_tier(mastery: Optional[int]) -> MasteryTier:
    if mastery is None:
        return MasteryTier.NO_DATA
    if mastery >= MASTERY_HIGH:
        return MasteryTier.HIGH
    if mastery >= MASTERY_MEDIUM:
        return MasteryTier.MEDIUM
    return MasteryTier.LOW


@dataclass(frozen=True)
class AbilityProgress:
    """Mastery and latest ratings for one ability slot."""

    slot: AbilitySlot
    mastery: Optional[int]
    review_count: int
    recent: tuple[SkillReviewRecord, ...]


@dataclass(frozen=True)
class ChampionProgress:
    """Mastery for one champion, overall and per slot."""

    champion_id: str
    mastery: Optional[int]
    review_count: int
    abilities: tuple[AbilityProgress, ...]


def champion_progress(
    champion_id: str,
    records: Iterable[SkillReviewRecord],
    recent_limit: int = RECENT_RATINGS_PER_ABILITY,
) -> ChampionProgress:
    """Aggregate a champion's records into overall and per-slot mastery."""
    own = filter_records(records, champion_id=champion_id)
    abilities = []
    for slot in ABILITY_SLOTS:
        slot_records = filter_records(own, slot=slot)
        abilities.append(
            AbilityProgress(
                slot=slot,
                mastery=compute_mastery(slot_records),
                review_count=len(slot_records),
                recent=tuple(newest_first(slot_records)[:recent_limit]),
            )
        )
    return ChampionProgress(
        champion_id=champion_id,
        mastery=compute_mastery(own),
        review_count=len(own),
        abilities=tuple(abilities),
    )


def relative_time(timestamp: int, now: int) -> str:
    """Short label for how long ago a millisecond timestamp was."""
    seconds = (now - timestamp) // 1000
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 30:
        return f"{days}d ago"
    return f"{days // 30}mo ago"
