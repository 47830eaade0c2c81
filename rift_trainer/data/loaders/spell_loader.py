"""Champion ability loader.

The spells snapshot has been written in two shapes over time:

* current: ``{"name": ..., "abilities": [{"key", "name", "icon", "effects",
  "cooldown", "cost", "resource", "damageType", "targeting"}]}`` with
  pre-formatted cooldown/cost strings and icon URLs;
* legacy: ``{"passive": {...}, "spells": [{"key", "name", "description",
  "image", "cooldown": [..], "cost": [..], "costType"}]}`` with per-rank
  number arrays and icon file names.

Both are normalized into :class:`Ability` here so nothing downstream has to
know which one it got.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from rift_trainer.core.constants import ability_image_url, fallback_ability_icon

from ..models.ability import Ability, AbilityEffect, AbilityScaling, AbilitySlot
from .champion_loader import DATA_DIR, read_snapshot


logger = logging.getLogger(__name__)

SPELLS_FILENAME = "champion_spells.json"
LEGACY_SPELL_KEYS = ("Q", "W", "E", "R")


def format_rank_values(values: Any) -> Optional[str]:
    """Format per-rank numbers as "a/b/c".

    Strings pass through unchanged. All-zero arrays mean "no cost" and
    yield None.
    """
    if values is None or isinstance(values, str):
        return values or None
    numbers = [float(v) for v in values]
    if not numbers or all(n == 0 for n in numbers):
        return None
    return "/".join(f"{n:g}" for n in numbers)


def _icon_url(icon: Optional[str], champion_id: str, slot: AbilitySlot, version: str) -> str:
    if not icon:
        return fallback_ability_icon(champion_id, slot)
    if "://" in icon:
        return icon
    return ability_image_url(version, slot, icon)


def _parse_effects(raw_effects: Any) -> list[AbilityEffect]:
    effects = []
    for raw in raw_effects or []:
        scalings = [
            AbilityScaling(attribute=s["attribute"], value=str(s["value"]))
            for s in raw.get("scalings", [])
        ]
        effects.append(AbilityEffect(description=raw.get("description", ""), scalings=scalings))
    return effects


def _parse_current(data: dict, champion_id: str, version: str) -> list[Ability]:
    """Parse the current snapshot shape."""
    abilities = []
    for raw in data.get("abilities", []):
        slot = _parse_slot(raw.get("key"))
        if slot is None:
            continue
        abilities.append(
            Ability(
                slot=slot,
                name=raw["name"],
                image_url=_icon_url(raw.get("icon"), champion_id, slot, version),
                effects=_parse_effects(raw.get("effects")),
                cooldown=format_rank_values(raw.get("cooldown")),
                cost=format_rank_values(raw.get("cost")),
                resource=raw.get("resource"),
                damage_type=raw.get("damageType"),
                targeting=raw.get("targeting"),
            )
        )
    return abilities


def _parse_legacy(data: dict, champion_id: str, version: str) -> list[Ability]:
    """Parse the legacy passive + spells shape."""
    abilities = []
    passive = data.get("passive")
    if passive:
        abilities.append(
            Ability(
                slot=AbilitySlot.P,
                name=passive["name"],
                image_url=_icon_url(passive.get("image"), champion_id, AbilitySlot.P, version),
                effects=[AbilityEffect(description=passive.get("description", ""))],
            )
        )
    for index, raw in enumerate(data.get("spells", [])):
        key = raw.get("key") or (LEGACY_SPELL_KEYS[index] if index < len(LEGACY_SPELL_KEYS) else None)
        slot = _parse_slot(key)
        if slot is None:
            continue
        resource = (raw.get("costType") or "").strip() or None
        abilities.append(
            Ability(
                slot=slot,
                name=raw["name"],
                image_url=_icon_url(raw.get("image"), champion_id, slot, version),
                effects=[AbilityEffect(description=raw.get("description", ""))],
                cooldown=format_rank_values(raw.get("cooldown")),
                cost=format_rank_values(raw.get("cost")),
                resource=resource,
            )
        )
    return abilities


def _parse_slot(key: Any) -> Optional[AbilitySlot]:
    try:
        return AbilitySlot(key)
    except ValueError:
        return None


def parse_champion_abilities(data: dict, champion_id: str, version: str) -> list[Ability]:
    """Normalize one champion's spell record, whatever its shape.

    Returns:
        Abilities sorted in canonical slot order.
    """
    if "abilities" in data:
        abilities = _parse_current(data, champion_id, version)
    else:
        abilities = _parse_legacy(data, champion_id, version)
    return sorted(abilities, key=lambda a: a.slot.order)


def load_spell_data(data_dir: Optional[Path] = None) -> tuple[str, dict[str, list[Ability]]]:
    """Load and normalize the spells snapshot.

    Returns:
        (version, abilities by champion id). Malformed champion entries are
        skipped with a warning.
    """
    data = read_snapshot((data_dir or DATA_DIR) / SPELLS_FILENAME)
    if not isinstance(data, dict):
        return "", {}

    version = str(data.get("version", ""))
    spells = {}
    for champion_id, champ_data in (data.get("champions") or {}).items():
        try:
            spells[champion_id] = parse_champion_abilities(champ_data, champion_id, version)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping malformed spell data for %s: %s", champion_id, e)
    return version, spells
