"""
Review history and mastery service.
"""

from typing import Optional, List
import logging

from rift_trainer.core.filters import FilterState
from rift_trainer.core.history_store import HistoryStore, newest_first, now_ms
from rift_trainer.core.mastery import champion_progress, compute_mastery, mastery_tier
from rift_trainer.data.catalog import Catalog
from rift_trainer.data.models import ChampionClass

from ..schemas.progress import (
    AbilityProgressSchema,
    ChampionProgressSchema,
    DirectoryEntrySchema,
    DirectoryResponse,
    HistoryResponse,
)
from .common import to_champion_schema, to_record_schema

logger = logging.getLogger(__name__)


class ProgressService:
    """Read-side views over the review history."""

    def __init__(self, catalog: Catalog, history_store: HistoryStore):
        self.catalog = catalog
        self.history_store = history_store

    def get_history(self, limit: Optional[int] = None) -> HistoryResponse:
        """All records, newest first."""
        records = newest_first(self.history_store.load())
        now = now_ms()
        shown = records[:limit] if limit is not None else records
        return HistoryResponse(
            records=[to_record_schema(r, now) for r in shown],
            total=len(records),
        )

    def clear_history(self, confirm: bool) -> None:
        """Delete all records; ValueError unless confirmed."""
        self.history_store.clear(confirm=confirm)

    def get_directory(
        self,
        search: str = "",
        classes: Optional[List[ChampionClass]] = None,
    ) -> DirectoryResponse:
        """Champions matching search and class filters, with mastery."""
        filters = FilterState.from_values(classes=classes, search=search)
        records = self.history_store.load()

        by_champion: dict[str, list] = {}
        for record in records:
            by_champion.setdefault(record.champion_id, []).append(record)

        entries = []
        for champion in filters.apply(self.catalog.champions):
            own = by_champion.get(champion.id, [])
            mastery = compute_mastery(own)
            entries.append(
                DirectoryEntrySchema(
                    champion=to_champion_schema(self.catalog, champion),
                    mastery=mastery,
                    tier=mastery_tier(mastery).value,
                    review_count=len(own),
                )
            )
        return DirectoryResponse(entries=entries, total=len(entries))

    def get_champion_progress(self, champion_id: str) -> Optional[ChampionProgressSchema]:
        """Overall and per-ability mastery for one champion."""
        champion = self.catalog.get_champion(champion_id)
        if champion is None:
            return None

        progress = champion_progress(champion_id, self.history_store.load())
        now = now_ms()
        abilities = []
        for ability_progress in progress.abilities:
            ability = self.catalog.get_ability(champion_id, ability_progress.slot)
            abilities.append(
                AbilityProgressSchema(
                    slot=ability_progress.slot,
                    ability_name=ability.name if ability else ability_progress.slot.value,
                    image_url=ability.image_url if ability else "",
                    mastery=ability_progress.mastery,
                    tier=mastery_tier(ability_progress.mastery).value,
                    review_count=ability_progress.review_count,
                    recent=[to_record_schema(r, now) for r in ability_progress.recent],
                )
            )
        return ChampionProgressSchema(
            champion=to_champion_schema(self.catalog, champion),
            mastery=progress.mastery,
            tier=mastery_tier(progress.mastery).value,
            review_count=progress.review_count,
            abilities=abilities,
        )
