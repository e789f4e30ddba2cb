"""Persisted snapshot models.

`SaveRecord` is the whole storage contract between the engine and any
persistence tier. Fields that older saves may lack carry defaults so those
saves still load.

Usage:
    record = SaveRecord(currency=50.0, level=1, entities=[], purchased_upgrade_ids=[])
    payload = record.model_dump_json()
    SaveRecord.model_validate_json(payload) == record
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CAPACITY = 6
"""Capacity assumed for saves written before capacity upgrades existed."""


class EntityRecord(BaseModel):
    """Persisted form of one owned producer."""

    model_config = ConfigDict(extra="ignore")

    instance_id: str
    level: int = Field(ge=1)
    template_id: str
    invested_value: float | None = None
    """Absent in old saves; restored as template cost x level."""


class SaveRecord(BaseModel):
    """Full persisted game state."""

    model_config = ConfigDict(extra="ignore")

    currency: float = Field(ge=0)
    level: int = Field(ge=1)
    capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    entities: list[EntityRecord]
    purchased_upgrade_ids: list[str]
    purchased_capacity_upgrade_ids: list[str] = Field(default_factory=list)
    unlocked_achievement_ids: list[str] = Field(default_factory=list)
