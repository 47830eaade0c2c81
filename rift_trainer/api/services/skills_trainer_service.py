"""
Skills trainer service.
"""

from typing import Optional
import logging
import random

from rift_trainer.core.history_store import HistoryStore, Rating, now_ms
from rift_trainer.core.queue_builder import QueueOrder
from rift_trainer.core.skills_session import SkillsTrainerSession
from rift_trainer.data.catalog import Catalog

from ..schemas.common import FilterSchema
from ..schemas.skills_trainer import (
    CurrentAbilitySchema,
    RateResponse,
    SkillsSessionSchema,
    SkillsSummarySchema,
)
from .common import SessionRegistry, to_ability_schema, to_filter_state, to_record_schema

logger = logging.getLogger(__name__)


class SkillsTrainerService:
    """Manages skills trainer sessions; ratings go to the history store."""

    def __init__(
        self,
        catalog: Catalog,
        history_store: HistoryStore,
        max_sessions: int = 100,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.history_store = history_store
        self.rng = rng
        self.sessions: SessionRegistry[SkillsTrainerSession] = SessionRegistry(max_sessions)

    def create_session(
        self,
        filters: Optional[FilterSchema] = None,
        order: QueueOrder = QueueOrder.GROUPED,
    ) -> SkillsSessionSchema:
        session = SkillsTrainerSession(
            self.catalog,
            history_store=self.history_store,
            filters=to_filter_state(filters),
            order=order,
            rng=self.rng,
        )
        session_id = self.sessions.add(session)
        return self.to_schema(session_id, session)

    def get_session(self, session_id: str) -> Optional[SkillsSessionSchema]:
        session = self.sessions.get(session_id)
        if session is None:
            return None
        return self.to_schema(session_id, session)

    def start(self, session_id: str) -> SkillsSessionSchema:
        session = self.sessions.require(session_id)
        session.start()
        logger.info("Skills session %s started with %d abilities", session_id, len(session.queue))
        return self.to_schema(session_id, session)

    def reveal(self, session_id: str) -> SkillsSessionSchema:
        session = self.sessions.require(session_id)
        session.reveal()
        return self.to_schema(session_id, session)

    def rate(self, session_id: str, rating: Rating) -> RateResponse:
        session = self.sessions.require(session_id)
        record = session.submit_rating(rating)
        return RateResponse(
            record=to_record_schema(record, now_ms()),
            session=self.to_schema(session_id, session),
        )

    def finish(self, session_id: str) -> SkillsSessionSchema:
        session = self.sessions.require(session_id)
        session.finish()
        return self.to_schema(session_id, session)

    def restart(self, session_id: str) -> SkillsSessionSchema:
        session = self.sessions.require(session_id)
        session.restart()
        return self.to_schema(session_id, session)

    def delete_session(self, session_id: str) -> bool:
        return self.sessions.remove(session_id)

    def to_schema(self, session_id: str, session: SkillsTrainerSession) -> SkillsSessionSchema:
        """Convert to schema."""
        current = None
        item = session.current_item
        if item is not None and item.ability is not None:
            current = CurrentAbilitySchema(
                champion_id=item.champion.id,
                champion_name=item.champion.name,
                champion_image_url=self.catalog.image_url(item.champion),
                slot=item.ability.slot,
                image_url=item.ability.image_url,
                patch=item.patch,
                revealed=session.revealed,
                ability=to_ability_schema(item.ability) if session.revealed else None,
            )

        summary = session.summary()
        return SkillsSessionSchema(
            session_id=session_id,
            status=session.status.value,
            order=session.order,
            can_start=session.can_start,
            no_data=not session.has_data,
            position=session.index,
            queue_length=len(session.queue),
            current=current,
            summary=SkillsSummarySchema(
                reviewed=summary.reviewed,
                remaining=summary.remaining,
                nailed=summary.nailed,
                partial=summary.partial,
                no_idea=summary.no_idea,
                mastery=summary.mastery,
            ),
        )
