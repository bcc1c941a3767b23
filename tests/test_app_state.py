from __future__ import annotations

import json

from src.matching_pairs_game.adapters.storage_json_file import JsonFileStorage
from src.matching_pairs_game.domain import STORAGE_KEY, Pair
from src.matching_pairs_game.services import app_state, data_access
from src.matching_pairs_game.services.config_loader import set_runtime_config


class TestInitializeState:
    def test_loads_once(self, store, storage_with, tmp_path):
        first = storage_with({STORAGE_KEY: json.dumps([{"item1": "a", "item2": "b"}])})
        app_state.initialize_state(store, first, tmp_path / "none.json")
        assert data_access.get_pairs(store) == [Pair("a", "b")]

        second = storage_with({STORAGE_KEY: json.dumps([])})
        app_state.initialize_state(store, second, tmp_path / "none.json")
        assert data_access.get_pairs(store) == [Pair("a", "b")]

    def test_unreadable_storage_gives_empty(self, store, failing_storage, tmp_path):
        state = app_state.initialize_state(store, failing_storage, tmp_path / "none.json")
        assert state.pairs == []


class TestApplyRuntimeSettings:
    def test_storage_path_change_triggers_reload(self, store, storage_with, tmp_path):
        app_state.initialize_state(store, storage_with({STORAGE_KEY: "[]"}), tmp_path / "none.json")
        set_runtime_config({"storage": {"path": str(tmp_path / "other.json")}})
        assert app_state.apply_runtime_settings(store)
        assert not store.get(app_state.LOADED_KEY)

        other = storage_with({STORAGE_KEY: json.dumps([{"item1": "x", "item2": "y"}])})
        app_state.initialize_state(store, other, tmp_path / "none.json")
        assert data_access.get_pairs(store) == [Pair("x", "y")]

    def test_timing_only_change_keeps_pairs(self, store, storage_with, tmp_path):
        app_state.initialize_state(store, storage_with({STORAGE_KEY: "[]"}), tmp_path / "none.json")
        set_runtime_config({"timing": {"mismatch_clear_ms": 500}})
        assert not app_state.apply_runtime_settings(store)
        assert data_access.get_state(store).settings.mismatch_clear_ms == 500

    def test_storage_path_stays_in_uploading_session(self, store, new_store, storage_with, tmp_path):
        app_state.initialize_state(store, storage_with({STORAGE_KEY: "[]"}), tmp_path / "none.json")
        set_runtime_config({"storage": {"path": str(tmp_path / "mine.json")}})
        app_state.apply_runtime_settings(store)
        assert data_access.get_state(store).settings.storage_path == str(tmp_path / "mine.json")

        other_session = new_store()
        assert data_access.get_state(other_session).settings.storage_path is None


class TestFirstPageOpened:
    def test_fresh_session_reads_stored_pairs(self, store, tmp_path):
        path = tmp_path / "store.json"
        JsonFileStorage(path).set_item(STORAGE_KEY, json.dumps([{"item1": "a", "item2": "b"}]))
        state = app_state.initialize_state(store, JsonFileStorage(path), tmp_path / "none.json")
        assert state.pairs == [Pair("a", "b")]
