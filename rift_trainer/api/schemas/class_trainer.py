"""
Class trainer API schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from rift_trainer.data.models import ChampionClass

from .common import FilterSchema


# === Request Schemas ===


class CreateClassSessionRequest(BaseModel):
    """Class trainer session creation request."""

    filters: FilterSchema = Field(default_factory=FilterSchema)


class GuessRequest(BaseModel):
    """Class guess. Omit ``classes`` to submit the current selection."""

    classes: Optional[List[str]] = None


# === Response Schemas ===


class CurrentChampionSchema(BaseModel):
    """The champion being guessed. Classes are not included."""

    id: str
    name: str
    image_url: str
    patch: Optional[str] = None


class ClassGuessResultSchema(BaseModel):
    cls: ChampionClass
    hit: bool


class GuessResultSchema(BaseModel):
    """Outcome of one guess."""

    results: List[ClassGuessResultSchema]
    exact_match: bool
    missed: List[ChampionClass]


class HistoryEntrySchema(BaseModel):
    """One past guess."""

    champion_id: str
    champion_name: str
    image_url: str
    guess_results: List[ClassGuessResultSchema]
    exact_match: bool


class MissedChampionSchema(BaseModel):
    """Champion that took more than one attempt."""

    champion_id: str
    champion_name: str
    actual_classes: List[ChampionClass]


class ClassSessionSchema(BaseModel):
    """Class trainer session state."""

    session_id: str
    status: str
    can_start: bool
    no_data: bool
    score: int
    total_attempted: int
    attempts_on_current: int
    rounds_completed: int
    position: int
    queue_length: int
    current_champion: Optional[CurrentChampionSchema] = None
    selected: List[ChampionClass]
    discarded: List[ChampionClass]
    hints: List[ClassGuessResultSchema]
    history: List[HistoryEntrySchema]
    missed: List[MissedChampionSchema]
    last_result: Optional[GuessResultSchema] = None


class GuessResponse(BaseModel):
    """Guess outcome plus the updated session."""

    result: GuessResultSchema
    session: ClassSessionSchema
