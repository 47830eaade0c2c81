# Data Models
from .champion import Champion, ChampionClass, ClassGroup, GameChampion
from .ability import (
    Ability,
    AbilityEffect,
    AbilityScaling,
    AbilitySlot,
    ChampionSpellSet,
)

__all__ = [
    "Champion",
    "ChampionClass",
    "ClassGroup",
    "GameChampion",
    "Ability",
    "AbilityEffect",
    "AbilityScaling",
    "AbilitySlot",
    "ChampionSpellSet",
]
