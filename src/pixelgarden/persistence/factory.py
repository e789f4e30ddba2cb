"""Default persistence wiring: JSON file first, memory as fallback."""

from __future__ import annotations

from pixelgarden.config import GardenSettings
from pixelgarden.persistence.file import JsonFilePersistence
from pixelgarden.persistence.memory import MemoryPersistence
from pixelgarden.persistence.resilient import ResilientPersistence


def create_persistence(settings: GardenSettings | None = None) -> ResilientPersistence:
    """Build Resilient(JsonFile -> Memory) from settings."""
    settings = settings or GardenSettings()
    return ResilientPersistence(
        primary=JsonFilePersistence(settings.save_path),
        fallback=MemoryPersistence(),
    )
