"""
Common API schemas.
"""

from pydantic import BaseModel
from typing import Optional
from enum import Enum

from rift_trainer.data.models import AbilitySlot, ChampionClass


class ResponseStatus(str, Enum):
    """Response status enum."""

    SUCCESS = "success"
    ERROR = "error"


class BaseResponse(BaseModel):
    """Base response model."""

    status: ResponseStatus = ResponseStatus.SUCCESS
    message: Optional[str] = None


class FilterSchema(BaseModel):
    """Enabled classes and ability slots. Omitted means all enabled."""

    classes: Optional[list[ChampionClass]] = None
    slots: Optional[list[AbilitySlot]] = None
