"""Tests for API service helpers."""

import pytest

from rift_trainer.api.schemas.common import FilterSchema
from rift_trainer.api.services import ClassTrainerService, SessionNotFoundError, SessionRegistry
from rift_trainer.core.constants import ALL_CLASSES
from rift_trainer.api.services.common import to_filter_state
from rift_trainer.data.models import AbilitySlot, ChampionClass


class TestSessionRegistry:
    """Tests for the in-memory session registry."""

    def test_add_get_remove(self):
        registry = SessionRegistry()
        session_id = registry.add("session")
        assert registry.get(session_id) == "session"
        assert registry.remove(session_id)
        assert not registry.remove(session_id)
        assert registry.get(session_id) is None

    def test_oldest_dropped_past_capacity(self):
        registry = SessionRegistry(max_sessions=2)
        first = registry.add("a")
        registry.add("b")
        registry.add("c")
        assert len(registry) == 2
        assert registry.get(first) is None

    def test_require_missing(self):
        with pytest.raises(SessionNotFoundError):
            SessionRegistry().require("nope")


class TestFilterConversion:
    """Tests for filter schema conversion."""

    def test_none_means_everything(self):
        filters = to_filter_state(None)
        assert filters.enabled_classes == set(ALL_CLASSES)

    def test_omitted_fields_mean_everything(self):
        filters = to_filter_state(FilterSchema(slots=[AbilitySlot.Q]))
        assert filters.enabled_classes == set(ALL_CLASSES)
        assert filters.enabled_slots == {AbilitySlot.Q}

    def test_explicit_empty_list(self):
        filters = to_filter_state(FilterSchema(classes=[]))
        assert filters.enabled_classes == set()


class TestClassTrainerService:
    """Tests for class trainer service history trimming."""

    def test_history_limited(self, catalog):
        service = ClassTrainerService(catalog, history_limit=2)
        session_id = service.create_session(
            FilterSchema(classes=[ChampionClass.ASSASSIN])
        ).session_id
        service.start(session_id)
        for _ in range(3):
            service.submit_guess(session_id, ["Burst"])
        schema = service.get_session(session_id)
        assert len(schema.history) == 2
        assert schema.attempts_on_current == 3
