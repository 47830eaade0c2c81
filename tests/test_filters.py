"""Tests for filter state."""

from rift_trainer.core.constants import ALL_CLASSES, ALL_SLOTS
from rift_trainer.core.filters import FilterState
from rift_trainer.data.models import AbilitySlot, ChampionClass


class TestFilterState:
    """Tests for class and slot toggles."""

    def test_defaults_enable_everything(self):
        filters = FilterState()
        assert filters.enabled_classes == set(ALL_CLASSES)
        assert filters.enabled_slots == set(ALL_SLOTS)
        assert filters.all_classes_enabled
        assert not filters.is_empty(needs_slots=True)

    def test_toggle_class(self):
        filters = FilterState()
        filters.toggle_class(ChampionClass.BURST)
        assert ChampionClass.BURST not in filters.enabled_classes
        assert not filters.all_classes_enabled
        filters.toggle_class(ChampionClass.BURST)
        assert filters.all_classes_enabled

    def test_deselect_all_classes_is_empty(self):
        filters = FilterState()
        filters.deselect_all_classes()
        assert filters.is_empty()
        filters.select_all_classes()
        assert not filters.is_empty()

    def test_no_slots_only_matters_when_needed(self):
        filters = FilterState()
        filters.deselect_all_slots()
        assert not filters.is_empty()
        assert filters.is_empty(needs_slots=True)

    def test_ordered_slots(self):
        filters = FilterState.from_values(slots=[AbilitySlot.R, AbilitySlot.P, AbilitySlot.W])
        assert filters.ordered_slots == [AbilitySlot.P, AbilitySlot.W, AbilitySlot.R]

    def test_toggle_slot(self):
        filters = FilterState()
        filters.toggle_slot(AbilitySlot.P)
        assert AbilitySlot.P not in filters.enabled_slots
        filters.select_all_slots()
        assert filters.enabled_slots == set(ALL_SLOTS)


class TestMatching:
    """Tests for champion matching."""

    def test_search_case_insensitive(self, catalog):
        filters = FilterState.from_values(search="  LEO ")
        assert [c.id for c in filters.apply(catalog.champions)] == ["Leona"]

    def test_any_class_overlap(self, catalog):
        filters = FilterState.from_values(classes=[ChampionClass.CATCHER, ChampionClass.SPECIALIST])
        assert [c.id for c in filters.apply(catalog.champions)] == ["Leona", "Teemo"]

    def test_search_and_classes_combine(self, catalog):
        filters = FilterState.from_values(classes=[ChampionClass.BURST], search="zed")
        assert filters.apply(catalog.champions) == []
