"""Tests for session queue construction."""

import random
from collections import Counter

import pytest

from rift_trainer.core.queue_builder import (
    QueueOrder,
    build_ability_queue,
    build_champion_queue,
    build_grouped_queue,
    build_interleaved_queue,
    shuffle,
)
from rift_trainer.data.models import AbilitySlot


class TestShuffle:
    """Tests for the Fisher-Yates shuffle."""

    def test_is_permutation(self, rng):
        items = list(range(20))
        shuffled = shuffle(items, rng)
        assert sorted(shuffled) == items

    def test_does_not_mutate_input(self, rng):
        items = [1, 2, 3, 4]
        shuffle(items, rng)
        assert items == [1, 2, 3, 4]

    def test_empty_and_single(self, rng):
        assert shuffle([], rng) == []
        assert shuffle(["a"], rng) == ["a"]

    def test_seeded_is_reproducible(self):
        items = list(range(10))
        assert shuffle(items, random.Random(7)) == shuffle(items, random.Random(7))

    def test_roughly_uniform(self):
        rng = random.Random(42)
        counts = Counter(tuple(shuffle([1, 2, 3], rng)) for _ in range(6000))
        assert len(counts) == 6
        assert all(800 < n < 1200 for n in counts.values())


class TestChampionQueue:
    """Tests for the class trainer queue."""

    def test_every_champion_once(self, catalog, rng):
        queue = build_champion_queue(catalog.champions, rng, patch="14.23.1")
        assert sorted(item.champion.id for item in queue) == sorted(c.id for c in catalog.champions)
        assert all(item.ability is None for item in queue)
        assert all(item.patch == "14.23.1" for item in queue)


class TestGroupedQueue:
    """Tests for champion-grouped ability queues."""

    def test_slots_contiguous_and_ordered(self, catalog, rng):
        queue = build_grouped_queue(catalog.champions, list(AbilitySlot), catalog.get_spell_set, rng)
        seen = []
        for item in queue:
            if not seen or seen[-1][0] != item.champion.id:
                seen.append((item.champion.id, []))
            seen[-1][1].append(item.slot.order)
        champion_ids = [cid for cid, _ in seen]
        assert len(champion_ids) == len(set(champion_ids))
        for _, orders in seen:
            assert orders == sorted(orders)

    def test_missing_abilities_skipped(self, catalog, rng):
        queue = build_grouped_queue(catalog.champions, list(AbilitySlot), catalog.get_spell_set, rng)
        assert "Teemo" not in {item.champion.id for item in queue}
        leona_slots = [item.slot for item in queue if item.champion.id == "Leona"]
        assert leona_slots == [AbilitySlot.Q, AbilitySlot.R]

    def test_slot_filter(self, catalog, rng):
        queue = build_grouped_queue(catalog.champions, [AbilitySlot.R], catalog.get_spell_set, rng)
        assert {item.slot for item in queue} == {AbilitySlot.R}
        assert len(queue) == 3

    def test_no_slots_is_empty(self, catalog, rng):
        assert build_grouped_queue(catalog.champions, [], catalog.get_spell_set, rng) == []


class TestInterleavedQueue:
    """Tests for interleaved ability queues."""

    def test_same_items_as_grouped(self, catalog):
        grouped = build_grouped_queue(
            catalog.champions, list(AbilitySlot), catalog.get_spell_set, random.Random(3)
        )
        interleaved = build_interleaved_queue(
            catalog.champions, list(AbilitySlot), catalog.get_spell_set, random.Random(3)
        )
        assert sorted(i.key for i in interleaved) == sorted(i.key for i in grouped)

    def test_build_ability_queue_dispatch(self, catalog):
        queue = build_ability_queue(
            catalog.champions,
            list(AbilitySlot),
            catalog.get_spell_set,
            order=QueueOrder.INTERLEAVED,
            rng=random.Random(5),
            patch="14.23.1",
        )
        assert len(queue) == 9
        assert all(item.patch == "14.23.1" for item in queue)
