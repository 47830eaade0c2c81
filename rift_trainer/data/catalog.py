"""Champion/ability catalog.

A read-only view over the versioned data snapshot: champion list, class
membership and normalized abilities. Loaded once per process.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from rift_trainer.core.constants import DEFAULT_CLASS, champion_image_url

from .loaders.champion_loader import DATA_DIR, load_champion_list, load_class_map
from .loaders.spell_loader import load_spell_data
from .models import Ability, AbilitySlot, Champion, ChampionClass, ChampionSpellSet, GameChampion


logger = logging.getLogger(__name__)


class Catalog:
    """Static reference data for one snapshot."""

    def __init__(
        self,
        champions: Iterable[Champion],
        class_map: Optional[dict[str, tuple[ChampionClass, ...]]] = None,
        spells: Optional[dict[str, list[Ability]]] = None,
        version: str = "",
        fetched_at: Optional[str] = None,
        spells_version: str = "",
    ):
        self.version = version
        self.fetched_at = fetched_at
        self.spells_version = spells_version or version
        self._class_map = dict(class_map or {})
        self._spells = dict(spells or {})
        self._champions = [self._to_game_champion(c) for c in champions]
        self._by_id = {c.id: c for c in self._champions}

    @classmethod
    def empty(cls) -> "Catalog":
        return cls([])

    @property
    def champions(self) -> list[GameChampion]:
        return list(self._champions)

    @property
    def is_empty(self) -> bool:
        return not self._champions

    def classes_for(self, champion_id: str) -> tuple[ChampionClass, ...]:
        """Class tags for a champion.

        Champions absent from the class map are Specialists.
        """
        mapped = self._class_map.get(champion_id)
        if mapped:
            return tuple(mapped)
        return (DEFAULT_CLASS,)

    def _to_game_champion(self, champion: Champion) -> GameChampion:
        if isinstance(champion, GameChampion):
            return champion
        return GameChampion(
            id=champion.id,
            name=champion.name,
            image=champion.image,
            classes=self.classes_for(champion.id),
        )

    def get_champion(self, champion_id: str) -> Optional[GameChampion]:
        return self._by_id.get(champion_id)

    def champions_with_classes(self, enabled: Iterable[ChampionClass]) -> list[GameChampion]:
        """Champions holding at least one of the enabled classes."""
        enabled = frozenset(enabled)
        return [c for c in self._champions if c.has_any_class(enabled)]

    def champions_by_class(self) -> dict[ChampionClass, list[GameChampion]]:
        """Map every class tag to the champions that have it."""
        by_class: dict[ChampionClass, list[GameChampion]] = {cls: [] for cls in ChampionClass}
        for champion in self._champions:
            for cls in champion.classes:
                by_class[cls].append(champion)
        return by_class

    def image_url(self, champion: Champion) -> str:
        return champion_image_url(self.version, champion.image)

    def get_spell_set(self, champion: Champion) -> Optional[ChampionSpellSet]:
        """Abilities for a champion, or None when the snapshot has none."""
        abilities = self._spells.get(champion.id)
        if abilities is None:
            return None
        return ChampionSpellSet(champion=champion, abilities=abilities)

    def get_ability(self, champion_id: str, slot: AbilitySlot) -> Optional[Ability]:
        for ability in self._spells.get(champion_id, []):
            if ability.slot == slot:
                return ability
        return None

    def all_abilities(self) -> list[tuple[GameChampion, Ability]]:
        """Every (champion, ability) pair in the catalog."""
        pairs = []
        for champion in self._champions:
            for ability in self._spells.get(champion.id, []):
                pairs.append((champion, ability))
        return pairs


def load_catalog_from(data_dir: Path) -> Catalog:
    """Build a catalog from the snapshot files in ``data_dir``."""
    version, fetched_at, champions = load_champion_list(data_dir)
    class_map = load_class_map(data_dir)
    spells_version, spells = load_spell_data(data_dir)
    if not champions:
        logger.warning("Catalog at %s has no champions", data_dir)
    else:
        logger.info(
            "Loaded catalog %s: %d champions, %d with abilities",
            version or "?",
            len(champions),
            len(spells),
        )
    return Catalog(
        champions,
        class_map=class_map,
        spells=spells,
        version=version,
        fetched_at=fetched_at,
        spells_version=spells_version,
    )


@lru_cache(maxsize=1)
def load_catalog(data_dir: Optional[str] = None) -> Catalog:
    """Load the catalog once per process.

    Args:
        data_dir: Snapshot directory; defaults to the bundled ``snapshot/``.
    """
    return load_catalog_from(Path(data_dir) if data_dir else DATA_DIR)


def clear_cache() -> None:
    """Clear the catalog cache. Useful for testing or hot-reloading data."""
    load_catalog.cache_clear()
