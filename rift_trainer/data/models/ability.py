"""Champion ability data models."""

import re
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field

from .champion import Champion


class AbilitySlot(StrEnum):
    """Ability positions, in canonical order."""
    P = "P"
    Q = "Q"
    W = "W"
    E = "E"
    R = "R"

    @property
    def order(self) -> int:
        return list(AbilitySlot).index(self)


_LEADING_NUMBER = re.compile(r"^\s*(-?\d+(?:\.\d+)?)")


class AbilityScaling(BaseModel):
    """One leveling value attached to an effect (e.g. "Magic Damage": "80/120/160")."""
    attribute: str
    value: str


class AbilityEffect(BaseModel):
    """One paragraph of ability effect text."""
    description: str
    scalings: list[AbilityScaling] = Field(default_factory=list)


class Ability(BaseModel):
    """Normalized ability record.

    Cooldown and cost are always pre-formatted strings here, whatever shape
    the snapshot stored them in.
    """
    slot: AbilitySlot
    name: str
    image_url: str = Field(default="", description="Icon URL")
    effects: list[AbilityEffect] = Field(default_factory=list)
    cooldown: Optional[str] = Field(default=None, description="e.g. 12/11/10/9/8")
    cost: Optional[str] = Field(default=None, description="e.g. 60/65/70/75/80")
    resource: Optional[str] = Field(default=None, description="Mana, Energy, Health...")
    damage_type: Optional[str] = Field(default=None, description="Physical, Magic, Mixed, True")
    targeting: Optional[str] = Field(default=None, description="Direction, Location, Unit, Auto...")

    model_config = {"frozen": True}

    @property
    def description(self) -> str:
        """Text of the first effect, or an empty string."""
        return self.effects[0].description if self.effects else ""

    @property
    def cooldown_values(self) -> list[float]:
        """Per-rank cooldowns parsed from the cooldown string.

        Only the leading number of each rank counts, so units and notes
        such as "12s" or "10 (per target)" still parse. Ranks that do not
        start with a number are skipped.
        """
        if self.cooldown is None:
            return []
        values = []
        for part in self.cooldown.split("/"):
            match = _LEADING_NUMBER.match(part)
            if match:
                values.append(float(match.group(1)))
        return values


class ChampionSpellSet(BaseModel):
    """A champion together with its abilities in slot order."""
    champion: Champion
    abilities: list[Ability] = Field(default_factory=list)

    def get(self, slot: AbilitySlot) -> Optional[Ability]:
        for ability in self.abilities:
            if ability.slot == slot:
                return ability
        return None

    @property
    def slots(self) -> list[AbilitySlot]:
        return [a.slot for a in self.abilities]
