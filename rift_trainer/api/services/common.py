"""
Shared service helpers: session registry and schema conversion.
"""

from collections import OrderedDict
from typing import Generic, Optional, TypeVar
import logging
import uuid

from rift_trainer.core.constants import RATING_LABELS
from rift_trainer.core.filters import FilterState
from rift_trainer.core.history_store import SkillReviewRecord
from rift_trainer.core.mastery import relative_time
from rift_trainer.data.catalog import Catalog
from rift_trainer.data.models import Ability, GameChampion

from ..schemas.common import FilterSchema
from ..schemas.data import (
    AbilityEffectSchema,
    AbilityScalingSchema,
    AbilitySchema,
    ChampionSchema,
)
from ..schemas.progress import ReviewRecordSchema

logger = logging.getLogger(__name__)

S = TypeVar("S")


class SessionNotFoundError(LookupError):
    """No session with the given id."""


class SessionRegistry(Generic[S]):
    """In-memory sessions keyed by id; the oldest is dropped past capacity."""

    def __init__(self, max_sessions: int = 100):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, S]" = OrderedDict()

    def add(self, session: S) -> str:
        session_id = str(uuid.uuid4())[:8]
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            dropped, _ = self._sessions.popitem(last=False)
            logger.info("Session limit reached, dropped session %s", dropped)
        return session_id

    def get(self, session_id: str) -> Optional[S]:
        return self._sessions.get(session_id)

    def require(self, session_id: str) -> S:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def remove(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)


def to_filter_state(filters: Optional[FilterSchema]) -> FilterState:
    if filters is None:
        return FilterState()
    return FilterState.from_values(classes=filters.classes, slots=filters.slots)


def to_champion_schema(catalog: Catalog, champion: GameChampion) -> ChampionSchema:
    return ChampionSchema(
        id=champion.id,
        name=champion.name,
        image=champion.image,
        image_url=catalog.image_url(champion),
        classes=list(champion.classes),
    )


def to_ability_schema(ability: Ability) -> AbilitySchema:
    return AbilitySchema(
        slot=ability.slot,
        name=ability.name,
        image_url=ability.image_url,
        effects=[
            AbilityEffectSchema(
                description=effect.description,
                scalings=[
                    AbilityScalingSchema(attribute=s.attribute, value=s.value)
                    for s in effect.scalings
                ],
            )
            for effect in ability.effects
        ],
        cooldown=ability.cooldown,
        cost=ability.cost,
        resource=ability.resource,
        damage_type=ability.damage_type,
        targeting=ability.targeting,
    )


def to_record_schema(record: SkillReviewRecord, now: int) -> ReviewRecordSchema:
    return ReviewRecordSchema(
        champion_id=record.champion_id,
        champion_name=record.champion_name,
        ability_key=record.ability_key,
        ability_name=record.ability_name,
        rating=record.rating,
        rating_label=RATING_LABELS[record.rating.value],
        timestamp=record.timestamp,
        relative_time=relative_time(record.timestamp, now),
    )
