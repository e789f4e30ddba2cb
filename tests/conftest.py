"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from pixelgarden import EngineConfig, GameEngine, MemoryPersistence, SaveRecord
from pixelgarden.persistence import PersistenceError


class FailingPersistence:
    """Tier whose medium is always unavailable."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def save(self, record: SaveRecord) -> None:
        self.calls.append("save")
        raise PersistenceError("disk unavailable")

    async def load(self) -> SaveRecord | None:
        self.calls.append("load")
        raise PersistenceError("disk unavailable")

    async def clear(self) -> None:
        self.calls.append("clear")
        raise PersistenceError("disk unavailable")


@pytest.fixture
def memory():
    """Fresh in-memory save slot."""
    return MemoryPersistence()


@pytest.fixture
def failing():
    """Save tier that fails every call."""
    return FailingPersistence()


@pytest.fixture
def failing_cls():
    return FailingPersistence


@pytest.fixture
def make_engine(memory):
    """Factory for engines sharing the `memory` slot, starting with given currency."""

    def _make(currency: float = 1_000, **kwargs) -> GameEngine:
        config = kwargs.pop("config", None) or EngineConfig(starting_currency=currency)
        persistence = kwargs.pop("persistence", memory)
        return GameEngine(persistence=persistence, config=config, **kwargs)

    return _make


@pytest.fixture
def engine(make_engine):
    """Engine with 1,000 currency and an empty garden."""
    return make_engine(1_000)
