"""Filter state shared by the trainer start screen and the progress directory."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from rift_trainer.core.constants import ABILITY_SLOTS, ALL_CLASSES, ALL_SLOTS
from rift_trainer.data.models import AbilitySlot, ChampionClass, GameChampion


@dataclass
class FilterState:
    """Enabled classes, enabled ability slots and a name search.

    Everything is enabled by default.
    """

    enabled_classes: set[ChampionClass] = field(default_factory=lambda: set(ALL_CLASSES))
    enabled_slots: set[AbilitySlot] = field(default_factory=lambda: set(ALL_SLOTS))
    search: str = ""

    @classmethod
    def from_values(
        cls,
        classes: Optional[Iterable[ChampionClass]] = None,
        slots: Optional[Iterable[AbilitySlot]] = None,
        search: str = "",
    ) -> "FilterState":
        """Build a filter; None means "all"."""
        return cls(
            enabled_classes=set(ALL_CLASSES if classes is None else classes),
            enabled_slots=set(ALL_SLOTS if slots is None else slots),
            search=search,
        )

    # --- classes ---

    def toggle_class(self, cls: ChampionClass) -> None:
        if cls in self.enabled_classes:
            self.enabled_classes.discard(cls)
        else:
            self.enabled_classes.add(cls)

    def select_all_classes(self) -> None:
        self.enabled_classes = set(ALL_CLASSES)

    def deselect_all_classes(self) -> None:
        self.enabled_classes = set()

    # --- slots ---

    def toggle_slot(self, slot: AbilitySlot) -> None:
        if slot in self.enabled_slots:
            self.enabled_slots.discard(slot)
        else:
            self.enabled_slots.add(slot)

    def select_all_slots(self) -> None:
        self.enabled_slots = set(ALL_SLOTS)

    def deselect_all_slots(self) -> None:
        self.enabled_slots = set()

    # --- queries ---

    @property
    def ordered_slots(self) -> list[AbilitySlot]:
        return [s for s in ABILITY_SLOTS if s in self.enabled_slots]

    @property
    def all_classes_enabled(self) -> bool:
        return self.enabled_classes >= ALL_CLASSES

    def is_empty(self, needs_slots: bool = False) -> bool:
        """True when nothing could ever match, so a session cannot start."""
        if not self.enabled_classes:
            return True
        return needs_slots and not self.enabled_slots

    def matches(self, champion: GameChampion) -> bool:
        """Whether a champion passes the search and class filters."""
        needle = self.search.strip().lower()
        if needle and needle not in champion.name.lower():
            return False
        return champion.has_any_class(self.enabled_classes)

    def apply(self, champions: Iterable[GameChampion]) -> list[GameChampion]:
        return [c for c in champions if self.matches(c)]
