"""
Static catalog API routes.
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional, List

from rift_trainer.core.constants import CLASS_GROUPS
from rift_trainer.data.catalog import Catalog
from rift_trainer.data.models import ChampionClass

from ..dependencies import get_catalog
from ..schemas.data import (
    CatalogInfoSchema,
    ChampionSchema,
    ClassesResponse,
    ClassGroupSchema,
    CooldownEntrySchema,
    SpellSetSchema,
)
from ..services.common import to_ability_schema, to_champion_schema

router = APIRouter()


@router.get("/info", response_model=CatalogInfoSchema)
async def get_catalog_info(catalog: Catalog = Depends(get_catalog)):
    """Snapshot version and size."""
    return CatalogInfoSchema(
        version=catalog.version,
        fetched_at=catalog.fetched_at,
        champion_count=len(catalog.champions),
        no_data=catalog.is_empty,
    )


# === Champions ===


@router.get("/champions", response_model=List[ChampionSchema])
async def get_all_champions(
    cls: Optional[ChampionClass] = None,
    catalog: Catalog = Depends(get_catalog),
):
    """Get all champions, optionally filtered by class."""
    champions = catalog.champions
    if cls is not None:
        champions = catalog.champions_with_classes([cls])
    return [to_champion_schema(catalog, c) for c in champions]


@router.get("/champions/{champion_id}", response_model=ChampionSchema)
async def get_champion(champion_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get specific champion by ID."""
    champion = catalog.get_champion(champion_id)
    if champion is None:
        raise HTTPException(status_code=404, detail="Champion not found")
    return to_champion_schema(catalog, champion)


@router.get("/champions/{champion_id}/spells", response_model=SpellSetSchema)
async def get_champion_spells(champion_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get a champion's abilities."""
    champion = catalog.get_champion(champion_id)
    if champion is None:
        raise HTTPException(status_code=404, detail="Champion not found")
    spell_set = catalog.get_spell_set(champion)
    if spell_set is None:
        raise HTTPException(status_code=404, detail="No ability data for champion")
    return SpellSetSchema(
        champion=to_champion_schema(catalog, champion),
        abilities=[to_ability_schema(a) for a in spell_set.abilities],
        version=catalog.spells_version,
    )


# === Classes ===


@router.get("/classes", response_model=ClassesResponse)
async def get_classes(catalog: Catalog = Depends(get_catalog)):
    """Class taxonomy with champion counts per subclass."""
    by_class = catalog.champions_by_class()
    groups = [
        ClassGroupSchema(
            parent=group.parent,
            subclasses=group.subclasses,
            champion_counts={cls.value: len(by_class[cls]) for cls in group.subclasses},
        )
        for group in CLASS_GROUPS
    ]
    return ClassesResponse(groups=groups, total_classes=len(ChampionClass))


# === Abilities ===


@router.get("/abilities/by-cooldown", response_model=List[CooldownEntrySchema])
async def get_abilities_by_cooldown(
    level: str = Query(default="first", pattern="^(first|max)$"),
    limit: int = Query(default=50, ge=1, le=1000),
    catalog: Catalog = Depends(get_catalog),
):
    """Abilities with a numeric cooldown, longest first.

    ``level=first`` ranks by rank-1 cooldown, ``level=max`` by max-rank.
    """
    entries = []
    for champion, ability in catalog.all_abilities():
        values = ability.cooldown_values
        if not values:
            continue
        entries.append(
            CooldownEntrySchema(
                champion_id=champion.id,
                champion_name=champion.name,
                slot=ability.slot,
                name=ability.name,
                description=ability.description,
                cooldown=values[0] if level == "first" else values[-1],
            )
        )
    entries.sort(key=lambda e: e.cooldown, reverse=True)
    return entries[:limit]
