"""Session queue construction.

Builds the randomized traversal order a trainer session walks through.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from rift_trainer.core.constants import ABILITY_SLOTS
from rift_trainer.data.models import Ability, AbilitySlot, ChampionSpellSet, GameChampion

T = TypeVar("T")


class QueueOrder(Enum):
    """How (champion, ability) items are ordered."""

    GROUPED = "grouped"          # All of a champion's slots before the next champion
    INTERLEAVED = "interleaved"  # Slots of different champions mixed together


@dataclass(frozen=True)
class QueueItem:
    """One unit of work in a session queue."""

    champion: GameChampion
    ability: Optional[Ability] = None
    patch: Optional[str] = None  # Catalog version the item came from

    @property
    def slot(self) -> Optional[AbilitySlot]:
        return self.ability.slot if self.ability else None

    @property
    def key(self) -> tuple[str, Optional[str]]:
        return (self.champion.id, self.slot.value if self.slot else None)


def shuffle(items: Iterable[T], rng: Optional[random.Random] = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``.

    Fisher-Yates: walk from the last index down to 1, swapping each
    position with a uniform pick from [0, i].
    """
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def build_champion_queue(
    champions: Sequence[GameChampion],
    rng: Optional[random.Random] = None,
    patch: Optional[str] = None,
) -> list[QueueItem]:
    """Class trainer queue: every champion once, in random order."""
    return [QueueItem(champion=c, patch=patch) for c in shuffle(champions, rng)]


def build_grouped_queue(
    champions: Sequence[GameChampion],
    slots: Iterable[AbilitySlot],
    get_spell_set: Callable[[GameChampion], Optional[ChampionSpellSet]],
    rng: Optional[random.Random] = None,
    patch: Optional[str] = None,
) -> list[QueueItem]:
    """Shuffle champions, then emit each one's enabled slots in P,Q,W,E,R order.

    Slots a champion has no ability data for are left out.
    """
    enabled = set(slots)
    ordered_slots = [s for s in ABILITY_SLOTS if s in enabled]
    if not ordered_slots:
        return []

    queue = []
    for champion in shuffle(champions, rng):
        spell_set = get_spell_set(champion)
        if spell_set is None:
            continue
        for slot in ordered_slots:
            ability = spell_set.get(slot)
            if ability is not None:
                queue.append(QueueItem(champion=champion, ability=ability, patch=patch))
    return queue


def build_interleaved_queue(
    champions: Sequence[GameChampion],
    slots: Iterable[AbilitySlot],
    get_spell_set: Callable[[GameChampion], Optional[ChampionSpellSet]],
    rng: Optional[random.Random] = None,
    patch: Optional[str] = None,
) -> list[QueueItem]:
    """Grouped queue followed by an independent shuffle over all items."""
    grouped = build_grouped_queue(champions, slots, get_spell_set, rng, patch)
    return shuffle(grouped, rng)


def build_ability_queue(
    champions: Sequence[GameChampion],
    slots: Iterable[AbilitySlot],
    get_spell_set: Callable[[GameChampion], Optional[ChampionSpellSet]],
    order: QueueOrder = QueueOrder.GROUPED,
    rng: Optional[random.Random] = None,
    patch: Optional[str] = None,
) -> list[QueueItem]:
    """Skills trainer queue in the requested order."""
    if order == QueueOrder.INTERLEAVED:
        return build_interleaved_queue(champions, slots, get_spell_set, rng, patch)
    return build_grouped_queue(champions, slots, get_spell_set, rng, patch)
