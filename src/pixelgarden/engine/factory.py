"""Composition root: build a ready-to-initialize engine from settings."""

from __future__ import annotations

from pixelgarden.catalog import Catalog
from pixelgarden.config import GardenSettings
from pixelgarden.engine.engine import GameEngine, ReloadHook
from pixelgarden.engine.models import EngineConfig
from pixelgarden.persistence.factory import create_persistence


def create_engine(
    settings: GardenSettings | None = None,
    catalog: Catalog | None = None,
    config: EngineConfig | None = None,
    reload: ReloadHook | None = None,
) -> GameEngine:
    """Wire Resilient(JsonFile -> Memory) persistence into a new GameEngine.

    The engine still needs `await engine.initialize()` before use.
    """
    return GameEngine(
        persistence=create_persistence(settings),
        catalog=catalog,
        config=config,
        reload=reload,
    )
