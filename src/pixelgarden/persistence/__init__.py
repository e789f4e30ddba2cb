"""Persistence backends and the resilient primary/fallback chain."""

from pixelgarden.persistence.errors import (
    ClearFailedError,
    CombinedPersistenceError,
    LoadFailedError,
    PersistenceError,
    SaveFailedError,
)
from pixelgarden.persistence.factory import create_persistence
from pixelgarden.persistence.file import JsonFilePersistence
from pixelgarden.persistence.memory import MemoryPersistence
from pixelgarden.persistence.models import DEFAULT_CAPACITY, EntityRecord, SaveRecord
from pixelgarden.persistence.protocol import PersistencePort
from pixelgarden.persistence.resilient import ResilientPersistence

__all__ = [
    # Protocol and models
    "PersistencePort",
    "SaveRecord",
    "EntityRecord",
    "DEFAULT_CAPACITY",
    # Tiers
    "MemoryPersistence",
    "JsonFilePersistence",
    "ResilientPersistence",
    "create_persistence",
    # Errors
    "PersistenceError",
    "CombinedPersistenceError",
    "SaveFailedError",
    "LoadFailedError",
    "ClearFailedError",
]
