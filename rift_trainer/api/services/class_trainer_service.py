"""
Class trainer service.
"""

from typing import Optional, List, Any
import logging
import random

from rift_trainer.core.class_session import ClassTrainerSession
from rift_trainer.core.guess_evaluator import GuessResult
from rift_trainer.data.catalog import Catalog
from rift_trainer.data.models import ChampionClass

from ..schemas.class_trainer import (
    ClassGuessResultSchema,
    ClassSessionSchema,
    CurrentChampionSchema,
    GuessResponse,
    GuessResultSchema,
    HistoryEntrySchema,
    MissedChampionSchema,
)
from ..schemas.common import FilterSchema
from .common import SessionRegistry, to_filter_state

logger = logging.getLogger(__name__)


def _guess_result_schema(result: GuessResult) -> GuessResultSchema:
    return GuessResultSchema(
        results=[ClassGuessResultSchema(cls=r.cls, hit=r.hit) for r in result.results],
        exact_match=result.exact_match,
        missed=list(result.missed),
    )


class ClassTrainerService:
    """Manages class trainer sessions."""

    def __init__(
        self,
        catalog: Catalog,
        history_limit: int = 10,
        max_sessions: int = 100,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.history_limit = history_limit
        self.rng = rng
        self.sessions: SessionRegistry[ClassTrainerSession] = SessionRegistry(max_sessions)

    def create_session(self, filters: Optional[FilterSchema] = None) -> ClassSessionSchema:
        """Create a session in the not-started state."""
        session = ClassTrainerSession(self.catalog, to_filter_state(filters), rng=self.rng)
        session_id = self.sessions.add(session)
        logger.debug("Created class trainer session %s", session_id)
        return self.to_schema(session_id, session)

    def get_session(self, session_id: str) -> Optional[ClassSessionSchema]:
        session = self.sessions.get(session_id)
        if session is None:
            return None
        return self.to_schema(session_id, session)

    def get_session_raw(self, session_id: str) -> Optional[ClassTrainerSession]:
        return self.sessions.get(session_id)

    def start(self, session_id: str) -> ClassSessionSchema:
        session = self.sessions.require(session_id)
        session.start()
        logger.info("Class trainer session %s started with %d champions", session_id, len(session.queue))
        return self.to_schema(session_id, session)

    def toggle_selection(self, session_id: str, cls: ChampionClass) -> ClassSessionSchema:
        session = self.sessions.require(session_id)
        session.toggle_selection(cls)
        return self.to_schema(session_id, session)

    def toggle_discard(self, session_id: str, cls: ChampionClass) -> ClassSessionSchema:
        session = self.sessions.require(session_id)
        session.toggle_discard(cls)
        return self.to_schema(session_id, session)

    def submit_guess(self, session_id: str, classes: Optional[List[Any]] = None) -> GuessResponse:
        session = self.sessions.require(session_id)
        result = session.submit_guess(classes)
        return GuessResponse(
            result=_guess_result_schema(result),
            session=self.to_schema(session_id, session),
        )

    def finish(self, session_id: str) -> ClassSessionSchema:
        session = self.sessions.require(session_id)
        session.finish()
        logger.info(
            "Class trainer session %s finished: %d/%d",
            session_id,
            session.score,
            session.total_attempted,
        )
        return self.to_schema(session_id, session)

    def restart(self, session_id: str) -> ClassSessionSchema:
        session = self.sessions.require(session_id)
        session.restart()
        return self.to_schema(session_id, session)

    def delete_session(self, session_id: str) -> bool:
        return self.sessions.remove(session_id)

    def to_schema(self, session_id: str, session: ClassTrainerSession) -> ClassSessionSchema:
        """Convert to schema."""
        current = None
        item = session.current_item
        if item is not None:
            current = CurrentChampionSchema(
                id=item.champion.id,
                name=item.champion.name,
                image_url=self.catalog.image_url(item.champion),
                patch=item.patch,
            )

        return ClassSessionSchema(
            session_id=session_id,
            status=session.status.value,
            can_start=session.can_start,
            no_data=not session.has_data,
            score=session.score,
            total_attempted=session.total_attempted,
            attempts_on_current=session.attempts_on_current,
            rounds_completed=session.rounds_completed,
            position=session.index,
            queue_length=len(session.queue),
            current_champion=current,
            selected=list(session.selected),
            discarded=sorted(session.discarded),
            hints=[ClassGuessResultSchema(cls=cls, hit=hit) for cls, hit in session.hints().items()],
            history=[
                HistoryEntrySchema(
                    champion_id=entry.champion.id,
                    champion_name=entry.champion.name,
                    image_url=self.catalog.image_url(entry.champion),
                    guess_results=[
                        ClassGuessResultSchema(cls=r.cls, hit=r.hit) for r in entry.guess_results
                    ],
                    exact_match=entry.exact_match,
                )
                for entry in session.recent_history(self.history_limit)
            ],
            missed=[
                MissedChampionSchema(
                    champion_id=m.champion.id,
                    champion_name=m.champion.name,
                    actual_classes=list(m.actual_classes),
                )
                for m in session.missed
            ],
            last_result=_guess_result_schema(session.last_result) if session.last_result else None,
        )
