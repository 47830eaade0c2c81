"""Tests for the review history store."""

import json

import pytest

from rift_trainer.core.history_store import (
    HistoryStore,
    Rating,
    SkillReviewRecord,
    filter_records,
    newest_first,
)
from rift_trainer.core.storage import LocalStorage
from rift_trainer.data.models import AbilitySlot


def make_record(champion_id="Ahri", slot=AbilitySlot.Q, rating=Rating.NAILED, timestamp=1000):
    return SkillReviewRecord(
        champion_id=champion_id,
        champion_name=champion_id,
        ability_key=slot,
        ability_name=f"{champion_id} {slot.value}",
        rating=rating,
        timestamp=timestamp,
    )


class TestLocalStorage:
    """Tests for the key-value storage."""

    def test_set_get_remove(self, storage):
        assert storage.get_item("k") is None
        storage.set_item("k", "v1")
        storage.set_item("k", "v2")
        assert storage.get_item("k") == "v2"
        assert storage.keys() == ["k"]
        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_persists_to_file(self, tmp_path):
        path = tmp_path / "nested" / "storage.db"
        first = LocalStorage(path)
        first.set_item("k", "v")
        first.close()
        second = LocalStorage(path)
        assert second.get_item("k") == "v"
        second.close()


class TestRecordFormat:
    """Tests for record serialization."""

    def test_stored_keys(self):
        data = make_record().to_dict()
        assert set(data) == {
            "championId",
            "championName",
            "abilityKey",
            "abilityName",
            "rating",
            "timestamp",
        }
        assert data["abilityKey"] == "Q"
        assert data["rating"] == "nailed"

    def test_from_dict_rejects_bad_values(self):
        good = make_record().to_dict()
        with pytest.raises(ValueError):
            SkillReviewRecord.from_dict({**good, "rating": "great"})
        with pytest.raises(ValueError):
            SkillReviewRecord.from_dict({**good, "abilityKey": "X"})
        with pytest.raises(TypeError):
            SkillReviewRecord.from_dict({**good, "timestamp": "yesterday"})
        with pytest.raises(KeyError):
            SkillReviewRecord.from_dict({"championId": "Ahri"})


class TestHistoryStore:
    """Tests for load/append/clear."""

    def test_empty_by_default(self, history_store):
        assert history_store.load() == []

    def test_append_preserves_order(self, history_store):
        first = make_record(timestamp=2000)
        second = make_record(champion_id="Zed", timestamp=1000)
        history_store.append([first])
        history_store.append([second])
        assert history_store.load() == [first, second]

    def test_append_empty_batch_is_noop(self, history_store, storage):
        history_store.append([])
        assert storage.get_item(history_store.key) is None

    def test_corrupt_json_reads_empty(self, history_store, storage):
        storage.set_item(history_store.key, "[{broken")
        assert history_store.load() == []

    def test_non_list_reads_empty(self, history_store, storage):
        storage.set_item(history_store.key, json.dumps({"records": []}))
        assert history_store.load() == []

    def test_malformed_entries_skipped(self, history_store, storage):
        good = make_record().to_dict()
        storage.set_item(history_store.key, json.dumps([good, {"rating": "nailed"}, 42]))
        assert history_store.load() == [make_record()]

    @pytest.mark.parametrize("timestamp", ["1e400", "Infinity", "-Infinity", "NaN"])
    def test_non_finite_timestamp_skipped(self, history_store, storage, timestamp):
        good = json.dumps(make_record().to_dict())
        bad = json.dumps({**make_record().to_dict(), "timestamp": 0}).replace(
            '"timestamp": 0', f'"timestamp": {timestamp}'
        )
        storage.set_item(history_store.key, f"[{bad}, {good}]")
        assert history_store.load() == [make_record()]

    def test_append_after_non_finite_timestamp(self, history_store, storage):
        bad = json.dumps(make_record().to_dict()).replace('"timestamp": 1000', '"timestamp": 1e400')
        storage.set_item(history_store.key, f"[{bad}]")
        history_store.append([make_record(timestamp=2000)])
        assert history_store.load() == [make_record(timestamp=2000)]

    def test_clear_requires_confirmation(self, history_store):
        history_store.append([make_record()])
        with pytest.raises(ValueError):
            history_store.clear()
        assert history_store.count() == 1
        history_store.clear(confirm=True)
        assert history_store.count() == 0

    def test_custom_key_is_isolated(self, storage):
        a = HistoryStore(storage, key="a")
        b = HistoryStore(storage, key="b")
        a.append([make_record()])
        assert b.load() == []


class TestFiltering:
    """Tests for record filtering helpers."""

    def test_filter_by_champion_and_slot(self):
        records = [
            make_record("Ahri", AbilitySlot.Q),
            make_record("Ahri", AbilitySlot.R),
            make_record("Zed", AbilitySlot.Q),
        ]
        assert len(filter_records(records, champion_id="Ahri")) == 2
        assert len(filter_records(records, slot=AbilitySlot.Q)) == 2
        assert filter_records(records, champion_id="Ahri", slot=AbilitySlot.R) == [records[1]]
        assert filter_records(records) == records

    def test_newest_first(self):
        records = [make_record(timestamp=t) for t in (1, 3, 2)]
        assert [r.timestamp for r in newest_first(records)] == [3, 2, 1]
