"""
Skills trainer API schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from rift_trainer.core.history_store import Rating
from rift_trainer.core.queue_builder import QueueOrder
from rift_trainer.data.models import AbilitySlot

from .common import FilterSchema
from .data import AbilitySchema
from .progress import ReviewRecordSchema


# === Request Schemas ===


class CreateSkillsSessionRequest(BaseModel):
    """Skills trainer session creation request."""

    filters: FilterSchema = Field(default_factory=FilterSchema)
    order: QueueOrder = QueueOrder.GROUPED


class RateRequest(BaseModel):
    """Self-rating for the current ability."""

    rating: Rating


# === Response Schemas ===


class CurrentAbilitySchema(BaseModel):
    """The ability being recalled. Details appear once revealed."""

    champion_id: str
    champion_name: str
    champion_image_url: str
    slot: AbilitySlot
    image_url: str
    patch: Optional[str] = None
    revealed: bool
    ability: Optional[AbilitySchema] = None


class SkillsSummarySchema(BaseModel):
    reviewed: int
    remaining: int
    nailed: int
    partial: int
    no_idea: int
    mastery: Optional[int] = None


class SkillsSessionSchema(BaseModel):
    """Skills trainer session state."""

    session_id: str
    status: str
    order: QueueOrder
    can_start: bool
    no_data: bool
    position: int
    queue_length: int
    current: Optional[CurrentAbilitySchema] = None
    summary: SkillsSummarySchema


class RateResponse(BaseModel):
    """Stored record plus the updated session."""

    record: ReviewRecordSchema
    session: SkillsSessionSchema
