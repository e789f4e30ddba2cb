"""JSON-file persistence tier.

One save slot per file. Writes go to a temporary sibling first and are moved
into place with `os.replace`, so a crash mid-write never leaves a truncated
save behind. Blocking file I/O runs in a worker thread.

Usage:
    port = JsonFilePersistence(Path("~/.pixelgarden/save.json").expanduser())
    await port.save(record)
"""

from __future__ import annotations

import asyncio
import logging
import os
import threading
from pathlib import Path

from pydantic import ValidationError

from pixelgarden.persistence.errors import PersistenceError
from pixelgarden.persistence.models import SaveRecord

logger = logging.getLogger(__name__)


class JsonFilePersistence:
    """Save slot backed by a single JSON file.

    Args:
        path: Location of the save file. Parent directories are created on
            first save.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)
        # Worker threads share one temporary file
        self._write_lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def save(self, record: SaveRecord) -> None:
        await asyncio.to_thread(self._write, record.model_dump_json(indent=2))

    async def load(self) -> SaveRecord | None:
        payload = await asyncio.to_thread(self._read)
        if payload is None:
            return None
        try:
            return SaveRecord.model_validate_json(payload)
        except ValidationError as e:
            raise PersistenceError(f"Save file {self._path} is not a valid save") from e

    async def clear(self) -> None:
        await asyncio.to_thread(self._remove)

    def _write(self, payload: str) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        with self._write_lock:
            self._replace(tmp_path, payload)
        logger.debug("Wrote save file %s", self._path)

    def _replace(self, tmp_path: Path, payload: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise PersistenceError(f"Could not write save file {self._path}") from e

    def _read(self) -> str | None:
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PersistenceError(f"Could not read save file {self._path}") from e
        except UnicodeDecodeError as e:
            raise PersistenceError(f"Save file {self._path} is not valid UTF-8") from e

    def _remove(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Could not remove save file {self._path}") from e
