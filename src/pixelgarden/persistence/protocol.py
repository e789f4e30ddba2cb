"""Persistence protocol for swappable save backends.

The engine only needs somewhere to put one `SaveRecord` and get it back:
- In-memory (tests, last-resort fallback)
- JSON file on disk (default primary)
- Anything else offering save/load/clear

Usage:
    port = ResilientPersistence(JsonFilePersistence(path), MemoryPersistence())
    engine = GameEngine(port)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pixelgarden.persistence.models import SaveRecord


@runtime_checkable
class PersistencePort(Protocol):
    """Abstract save-slot interface. Implementations handle the actual medium.

    Every method raises on failure (medium unavailable, I/O error, unreadable
    data). "No save yet" is not a failure: `load` returns None.
    """

    async def save(self, record: SaveRecord) -> None:
        """Persist the record, replacing any previous one."""
        ...

    async def load(self) -> SaveRecord | None:
        """Return the stored record, or None if nothing was saved."""
        ...

    async def clear(self) -> None:
        """Delete the stored record. Clearing an empty slot succeeds."""
        ...
