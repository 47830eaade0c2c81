"""
Progress (review history and mastery) API schemas.
"""

from pydantic import BaseModel
from typing import Optional, List

from rift_trainer.core.history_store import Rating
from rift_trainer.data.models import AbilitySlot

from .data import ChampionSchema


class ReviewRecordSchema(BaseModel):
    """One stored self-rating."""

    champion_id: str
    champion_name: str
    ability_key: AbilitySlot
    ability_name: str
    rating: Rating
    rating_label: str
    timestamp: int
    relative_time: str


class HistoryResponse(BaseModel):
    """Review history, newest first."""

    records: List[ReviewRecordSchema]
    total: int


class DirectoryEntrySchema(BaseModel):
    champion: ChampionSchema
    mastery: Optional[int] = None
    tier: str
    review_count: int


class DirectoryResponse(BaseModel):
    """Champion directory filtered by search and classes."""

    entries: List[DirectoryEntrySchema]
    total: int


class AbilityProgressSchema(BaseModel):
    """Mastery for one ability slot."""

    slot: AbilitySlot
    ability_name: str
    image_url: str
    mastery: Optional[int] = None
    tier: str
    review_count: int
    recent: List[ReviewRecordSchema]


class ChampionProgressSchema(BaseModel):
    """A champion's mastery overall and per ability."""

    champion: ChampionSchema
    mastery: Optional[int] = None
    tier: str
    review_count: int
    abilities: List[AbilityProgressSchema]
