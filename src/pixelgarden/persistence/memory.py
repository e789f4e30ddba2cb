"""In-memory persistence tier.

Stores the record as serialized JSON so that the caller can never alias the
stored state. Suitable as the last-resort fallback and for tests.

Usage:
    port = MemoryPersistence()
    await port.save(record)
    await port.load()  # equal to record, but a fresh object
"""

from __future__ import annotations

from pixelgarden.persistence.models import SaveRecord


class MemoryPersistence:
    """Single-slot, process-local save storage."""

    def __init__(self) -> None:
        self._payload: str | None = None

    async def save(self, record: SaveRecord) -> None:
        self._payload = record.model_dump_json()

    async def load(self) -> SaveRecord | None:
        if self._payload is None:
            return None
        return SaveRecord.model_validate_json(self._payload)

    async def clear(self) -> None:
        self._payload = None

    @property
    def has_save(self) -> bool:
        """True if a record is currently stored."""
        return self._payload is not None
