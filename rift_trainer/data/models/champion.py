"""Champion and class taxonomy data models."""

from enum import StrEnum
from typing import AbstractSet, Optional

from pydantic import BaseModel, Field


class ChampionClass(StrEnum):
    """Riot's champion subclass tags."""
    ENCHANTER = "Enchanter"
    CATCHER = "Catcher"
    JUGGERNAUT = "Juggernaut"
    DIVER = "Diver"
    BURST = "Burst"
    BATTLEMAGE = "Battlemage"
    ARTILLERY = "Artillery"
    MARKSMAN = "Marksman"
    ASSASSIN = "Assassin"
    SKIRMISHER = "Skirmisher"
    VANGUARD = "Vanguard"
    WARDEN = "Warden"
    SPECIALIST = "Specialist"

    @classmethod
    def parse(cls, value: str) -> Optional["ChampionClass"]:
        """Return the matching class tag, or None for unknown strings."""
        try:
            return cls(value)
        except ValueError:
            return None


class ClassGroup(BaseModel):
    """A parent class category and its subclasses."""
    parent: str = Field(..., description="Parent category name (e.g. Mage)")
    subclasses: list[ChampionClass] = Field(..., min_length=1)


class Champion(BaseModel):
    """A playable champion as listed in the catalog snapshot."""
    id: str = Field(..., description="Data Dragon identifier (e.g. MonkeyKing)")
    name: str = Field(..., description="Display name")
    image: str = Field(..., description="Portrait file name")

    model_config = {"frozen": True}


class GameChampion(Champion):
    """Champion with its resolved class tags."""
    classes: tuple[ChampionClass, ...] = Field(..., min_length=1, max_length=2)

    def has_any_class(self, enabled: AbstractSet[ChampionClass]) -> bool:
        return any(cls in enabled for cls in self.classes)
