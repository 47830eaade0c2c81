"""Shared fixtures: a small hand-built catalog and in-memory history."""

import random

import pytest

from rift_trainer.core.history_store import HistoryStore
from rift_trainer.core.storage import LocalStorage
from rift_trainer.data.catalog import Catalog
from rift_trainer.data.models import (
    Ability,
    AbilityEffect,
    AbilitySlot,
    Champion,
    ChampionClass,
)


def make_ability(slot: AbilitySlot, name: str, cooldown=None) -> Ability:
    return Ability(
        slot=slot,
        name=name,
        image_url=f"https://example.test/{name}.png",
        effects=[AbilityEffect(description=f"{name} does things.")],
        cooldown=cooldown,
    )


@pytest.fixture
def champions():
    return [
        Champion(id="Ahri", name="Ahri", image="Ahri.png"),
        Champion(id="Leona", name="Leona", image="Leona.png"),
        Champion(id="Zed", name="Zed", image="Zed.png"),
        Champion(id="Teemo", name="Teemo", image="Teemo.png"),
    ]


@pytest.fixture
def class_map():
    return {
        "Ahri": (ChampionClass.BURST,),
        "Leona": (ChampionClass.VANGUARD, ChampionClass.CATCHER),
        "Zed": (ChampionClass.ASSASSIN,),
        # Teemo is unmapped and falls back to Specialist
    }


@pytest.fixture
def spells():
    return {
        "Ahri": [
            make_ability(AbilitySlot.P, "Essence Theft"),
            make_ability(AbilitySlot.Q, "Orb of Deception", "7"),
            make_ability(AbilitySlot.W, "Fox-Fire", "9/8/7/6/5"),
            make_ability(AbilitySlot.E, "Charm", "12"),
            make_ability(AbilitySlot.R, "Spirit Rush", "130/105/80"),
        ],
        "Leona": [
            make_ability(AbilitySlot.Q, "Shield of Daybreak", "6/5.5/5/4.5/4"),
            make_ability(AbilitySlot.R, "Solar Flare", "90/75/60"),
        ],
        "Zed": [
            make_ability(AbilitySlot.P, "Contempt for the Weak", "10 (per target)"),
            make_ability(AbilitySlot.R, "Death Mark", "120/100/80"),
        ],
    }


@pytest.fixture
def catalog(champions, class_map, spells):
    return Catalog(
        champions,
        class_map=class_map,
        spells=spells,
        version="14.23.1",
        fetched_at="2024-11-25T00:00:00Z",
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def storage():
    store = LocalStorage(":memory:")
    yield store
    store.close()


@pytest.fixture
def history_store(storage):
    return HistoryStore(storage)
