from __future__ import annotations

import json

import pytest

from src.matching_pairs_game.adapters.storage_json_file import JsonFileStorage
from src.matching_pairs_game.domain import StorageError


class TestJsonFileStorage:
    def test_missing_file_reads_none(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "store.json")
        assert storage.get_item("k") is None

    def test_set_then_get(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        storage = JsonFileStorage(path)
        storage.set_item("k", '[{"item1": "a", "item2": "b"}]')
        assert storage.get_item("k") == '[{"item1": "a", "item2": "b"}]'
        # 別インスタンスからも見える
        assert JsonFileStorage(path).get_item("k") == '[{"item1": "a", "item2": "b"}]'

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / "store.json"
        storage = JsonFileStorage(path)
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1", "b": "2"}

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{oops", encoding="utf-8")
        storage = JsonFileStorage(path)
        with pytest.raises(StorageError):
            storage.get_item("k")
        with pytest.raises(StorageError):
            storage.set_item("k", "v")
        assert path.read_text(encoding="utf-8") == "{oops"

    def test_unwritable_location(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        storage = JsonFileStorage(blocker / "store.json")
        with pytest.raises(StorageError):
            storage.set_item("k", "v")
