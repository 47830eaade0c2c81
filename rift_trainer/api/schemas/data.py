"""
Catalog API schemas.
"""

from pydantic import BaseModel
from typing import Optional, List

from rift_trainer.data.models import AbilitySlot, ChampionClass


class ChampionSchema(BaseModel):
    """Champion with its classes."""

    id: str
    name: str
    image: str
    image_url: str
    classes: List[ChampionClass]


class ClassGroupSchema(BaseModel):
    """Parent category with subclasses and champion counts."""

    parent: str
    subclasses: List[ChampionClass]
    champion_counts: dict[str, int]


class ClassesResponse(BaseModel):
    """Class taxonomy response."""

    groups: List[ClassGroupSchema]
    total_classes: int


class AbilityScalingSchema(BaseModel):
    attribute: str
    value: str


class AbilityEffectSchema(BaseModel):
    description: str
    scalings: List[AbilityScalingSchema]


class AbilitySchema(BaseModel):
    """Normalized ability."""

    slot: AbilitySlot
    name: str
    image_url: str
    effects: List[AbilityEffectSchema]
    cooldown: Optional[str] = None
    cost: Optional[str] = None
    resource: Optional[str] = None
    damage_type: Optional[str] = None
    targeting: Optional[str] = None


class SpellSetSchema(BaseModel):
    """A champion's abilities."""

    champion: ChampionSchema
    abilities: List[AbilitySchema]
    version: str


class CooldownEntrySchema(BaseModel):
    """One ability ranked by cooldown."""

    champion_id: str
    champion_name: str
    slot: AbilitySlot
    name: str
    description: str
    cooldown: float


class CatalogInfoSchema(BaseModel):
    """Snapshot metadata."""

    version: str
    fetched_at: Optional[str] = None
    champion_count: int
    no_data: bool
