"""Resilient persistence: a primary tier backed by a fallback tier.

Failure rules:
- save:  primary, then fallback on primary error. Fails only if both fail.
- load:  primary; only a primary *error* falls through to the fallback. A
         healthy primary answering "no save" (None) is final: fresh install.
         Fails only if both fail.
- clear: primary (errors logged and ignored), then always the fallback.
         Fails if the fallback fails.

Usage:
    port = ResilientPersistence(primary=JsonFilePersistence(path),
                                fallback=MemoryPersistence())
"""

from __future__ import annotations

import logging

from pixelgarden.persistence.errors import (
    ClearFailedError,
    LoadFailedError,
    SaveFailedError,
)
from pixelgarden.persistence.models import SaveRecord
from pixelgarden.persistence.protocol import PersistencePort

logger = logging.getLogger(__name__)


class ResilientPersistence:
    """PersistencePort composed of two PersistencePorts.

    Any exception raised by a tier counts as that tier failing. Combined
    failures surface as `SaveFailedError`, `LoadFailedError` or
    `ClearFailedError`.

    Args:
        primary: Preferred tier.
        fallback: Tier used when the primary fails.
    """

    def __init__(self, primary: PersistencePort, fallback: PersistencePort):
        self._primary = primary
        self._fallback = fallback

    @property
    def primary(self) -> PersistencePort:
        return self._primary

    @property
    def fallback(self) -> PersistencePort:
        return self._fallback

    async def save(self, record: SaveRecord) -> None:
        try:
            await self._primary.save(record)
            return
        except Exception as primary_error:
            logger.warning("Primary save failed, using fallback: %s", primary_error)
            try:
                await self._fallback.save(record)
            except Exception as fallback_error:
                logger.error("Fallback save failed: %s", fallback_error)
                raise SaveFailedError(
                    f"Both save tiers failed: {fallback_error}", primary_error
                ) from fallback_error

    async def load(self) -> SaveRecord | None:
        try:
            return await self._primary.load()
        except Exception as primary_error:
            logger.warning("Primary load failed, using fallback: %s", primary_error)
            try:
                return await self._fallback.load()
            except Exception as fallback_error:
                logger.error("Fallback load failed: %s", fallback_error)
                raise LoadFailedError(
                    f"Both load tiers failed: {fallback_error}", primary_error
                ) from fallback_error

    async def clear(self) -> None:
        primary_error: Exception | None = None
        try:
            await self._primary.clear()
        except Exception as e:
            logger.warning("Primary clear failed, clearing fallback: %s", e)
            primary_error = e
        try:
            await self._fallback.clear()
        except Exception as fallback_error:
            logger.error("Fallback clear failed: %s", fallback_error)
            raise ClearFailedError(
                f"Fallback clear failed: {fallback_error}", primary_error
            ) from fallback_error
