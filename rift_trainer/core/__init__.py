# Core trainer modules
# Session classes import the catalog, which imports this package's
# constants, so they are imported from their own modules.
from .constants import (
    ABILITY_SLOTS,
    ALL_CLASSES,
    ALL_SLOTS,
    CLASS_GROUPS,
    DEFAULT_CLASS,
    HISTORY_STORAGE_KEY,
    MAX_SELECTED_CLASSES,
    RATING_POINTS,
)

from .queue_builder import (
    QueueItem,
    QueueOrder,
    shuffle,
    build_champion_queue,
    build_grouped_queue,
    build_interleaved_queue,
    build_ability_queue,
)
from .guess_evaluator import (
    ClassGuessResult,
    GuessResult,
    is_exact_match,
    classify_guess,
    missed_classes,
    evaluate_guess,
)
from .filters import FilterState
from .storage import LocalStorage
from .history_store import HistoryStore, Rating, SkillReviewRecord, filter_records
from .mastery import MasteryTier, compute_mastery, mastery_tier, champion_progress

__all__ = [
    "ABILITY_SLOTS",
    "ALL_CLASSES",
    "ALL_SLOTS",
    "CLASS_GROUPS",
    "DEFAULT_CLASS",
    "HISTORY_STORAGE_KEY",
    "MAX_SELECTED_CLASSES",
    "RATING_POINTS",
    "QueueItem",
    "QueueOrder",
    "shuffle",
    "build_champion_queue",
    "build_grouped_queue",
    "build_interleaved_queue",
    "build_ability_queue",
    "ClassGuessResult",
    "GuessResult",
    "is_exact_match",
    "classify_guess",
    "missed_classes",
    "evaluate_guess",
    "FilterState",
    "LocalStorage",
    "HistoryStore",
    "Rating",
    "SkillReviewRecord",
    "filter_records",
    "MasteryTier",
    "compute_mastery",
    "mastery_tier",
    "champion_progress",
]
