"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • store        — dict-backed SessionStore
  • storage      — in-memory KeyValueStorage
  • rng          — seeded random.Random
  • make_pairs   — build a list of Pair from (item1, item2) tuples
  • failing_storage — KeyValueStorage whose reads and writes fail
  • storage_with — build an in-memory KeyValueStorage with initial items
  • new_store    — build another independent SessionStore (a second browser session)
"""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Callable
from typing import Any

import pytest

# Ensure the project root is on the path so `src.` imports resolve.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from src.matching_pairs_game.domain import Pair, StorageError  # noqa: E402
from src.matching_pairs_game.services.config_loader import set_runtime_config  # noqa: E402


class DictSessionStore:
    def __init__(self) -> None:
        self.data: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def get_or_create(self, key: str, factory: Callable[[], Any]) -> Any:
        if key not in self.data:
            self.data[key] = factory()
        return self.data[key]


class MemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes += 1
        self.items[key] = value


class FailingStorage:
    """Every read and write fails."""

    def get_item(self, key: str) -> str | None:
        raise StorageError("read failed")

    def set_item(self, key: str, value: str) -> None:
        raise StorageError("write failed")


@pytest.fixture(autouse=True)
def _clear_runtime_config():
    set_runtime_config(None)
    yield
    set_runtime_config(None)


@pytest.fixture
def store() -> DictSessionStore:
    return DictSessionStore()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_pairs():
    def _factory(*items: tuple[str, str]) -> list[Pair]:
        return [Pair(item1=a, item2=b) for a, b in items]

    return _factory


@pytest.fixture
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def storage_with():
    def _factory(initial: dict[str, str] | None = None) -> MemoryStorage:
        return MemoryStorage(initial)

    return _factory


@pytest.fixture
def new_store():
    def _factory() -> DictSessionStore:
        return DictSessionStore()

    return _factory
