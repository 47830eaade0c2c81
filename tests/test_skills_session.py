"""Tests for the skills trainer session."""

import pytest

from rift_trainer.core.filters import FilterState
from rift_trainer.core.history_store import Rating
from rift_trainer.core.queue_builder import QueueOrder
from rift_trainer.core.session import EmptyQueueError, SessionStateError, SessionStatus
from rift_trainer.core.skills_session import SkillsTrainerSession
from rift_trainer.data.models import AbilitySlot, ChampionClass


class FakeClock:
    """Millisecond clock advancing one second per call."""

    def __init__(self, start=1_700_000_000_000):
        self.now = start

    def __call__(self):
        self.now += 1000
        return self.now


@pytest.fixture
def session(catalog, history_store, rng):
    s = SkillsTrainerSession(catalog, history_store=history_store, rng=rng, clock=FakeClock())
    s.start()
    return s


class TestStart:
    """Tests for starting a skills session."""

    def test_queue_covers_all_abilities(self, session):
        assert len(session.queue) == 9
        assert session.status == SessionStatus.IN_PROGRESS
        assert session.current_item.patch == "14.23.1"

    def test_slot_filter(self, catalog, rng):
        filters = FilterState.from_values(slots=[AbilitySlot.R])
        s = SkillsTrainerSession(catalog, filters=filters, rng=rng)
        s.start()
        assert {item.slot for item in s.queue} == {AbilitySlot.R}

    def test_no_slots_cannot_start(self, catalog):
        s = SkillsTrainerSession(catalog, filters=FilterState.from_values(slots=[]))
        assert not s.can_start
        with pytest.raises(EmptyQueueError):
            s.start()

    def test_champions_without_abilities_cannot_start(self, catalog):
        filters = FilterState.from_values(classes=[ChampionClass.SPECIALIST])
        s = SkillsTrainerSession(catalog, filters=filters)
        assert not s.can_start
        assert not s.has_data

    def test_interleaved_order(self, catalog, rng):
        s = SkillsTrainerSession(catalog, order=QueueOrder.INTERLEAVED, rng=rng)
        s.start()
        assert len(s.queue) == 9


class TestRating:
    """Tests for reveal and self-rating."""

    def test_reveal(self, session):
        item = session.reveal()
        assert session.revealed
        assert item is session.current_item

    def test_reveal_requires_in_progress(self, catalog):
        with pytest.raises(SessionStateError):
            SkillsTrainerSession(catalog).reveal()

    def test_rating_persists_and_advances(self, session, history_store):
        item = session.current_item
        session.reveal()
        record = session.submit_rating(Rating.NAILED)
        assert record.champion_id == item.champion.id
        assert record.ability_key == item.slot
        assert record.ability_name == item.ability.name
        assert session.index == 1
        assert not session.revealed
        assert history_store.load() == [record]

    def test_rating_without_reveal_allowed(self, session):
        session.submit_rating(Rating.NO_IDEA)
        assert session.index == 1

    def test_last_rating_finishes(self, session, history_store):
        for _ in range(len(session.queue)):
            session.submit_rating(Rating.PARTIAL)
        assert session.status == SessionStatus.FINISHED
        assert session.remaining == 0
        assert history_store.count() == 9
        with pytest.raises(SessionStateError):
            session.submit_rating(Rating.NAILED)

    def test_timestamps_increase(self, session, history_store):
        session.submit_rating(Rating.NAILED)
        session.submit_rating(Rating.NAILED)
        first, second = history_store.load()
        assert second.timestamp > first.timestamp

    def test_finish_early_keeps_ratings(self, session, history_store):
        session.submit_rating(Rating.NAILED)
        session.finish()
        assert session.status == SessionStatus.FINISHED
        assert history_store.count() == 1

    def test_without_store_ratings_stay_local(self, catalog, rng):
        s = SkillsTrainerSession(catalog, rng=rng)
        s.start()
        s.submit_rating(Rating.NAILED)
        assert len(s.records) == 1


class TestSummary:
    """Tests for the session summary."""

    def test_counts_and_mastery(self, session):
        session.submit_rating(Rating.NAILED)
        session.submit_rating(Rating.PARTIAL)
        session.submit_rating(Rating.NO_IDEA)
        summary = session.summary()
        assert (summary.nailed, summary.partial, summary.no_idea) == (1, 1, 1)
        assert summary.reviewed == 3
        assert summary.remaining == 6
        assert summary.mastery == 50

    def test_empty_summary(self, catalog):
        summary = SkillsTrainerSession(catalog).summary()
        assert summary.reviewed == 0
        assert summary.mastery is None

    def test_restart_clears_session_not_history(self, session, history_store):
        session.submit_rating(Rating.NAILED)
        session.restart()
        assert session.records == []
        assert session.status == SessionStatus.NOT_STARTED
        assert history_store.count() == 1
