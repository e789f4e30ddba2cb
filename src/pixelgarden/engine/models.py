"""Engine models: configuration, purchase checks and read-only snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pixelgarden.catalog.models import Biome
from pixelgarden.core.growth import GrowableEntity
from pixelgarden.engine.economy import (
    ENTITIES_PER_LEVEL,
    LEVEL_UP_FACTOR,
    PURCHASE_GROWTH,
    SALVAGE_RATE,
)
from pixelgarden.persistence.models import DEFAULT_CAPACITY


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Economy constants. Defaults are the shipped game balance."""

    starting_currency: float = 50.0
    """Currency granted when no save exists."""

    default_capacity: int = DEFAULT_CAPACITY
    """Garden capacity before any capacity upgrade."""

    per_type_limit: int = 5
    """Hard cap on producers sharing one template."""

    purchase_growth: float = PURCHASE_GROWTH
    """Price factor per unit already owned of the same type."""

    level_up_factor: float = LEVEL_UP_FACTOR
    """Level-up price = base cost * factor * current level."""

    salvage_rate: float = SALVAGE_RATE
    """Share of invested value refunded on sell."""

    entities_per_level: int = ENTITIES_PER_LEVEL
    """Producers needed per player level."""


class RejectReason(Enum):
    """Why a producer purchase is not allowed."""

    CAPACITY_FULL = "capacity full"
    TYPE_LIMIT = "type limit"
    UNKNOWN_PRODUCER = "unknown producer"


@dataclass(frozen=True, slots=True)
class PurchaseCheck:
    """Outcome of `GameEngine.can_purchase_entity`. Truthy when allowed."""

    allowed: bool
    reason: RejectReason | None = None

    def __bool__(self) -> bool:
        return self.allowed


class UpgradeStatus(Enum):
    """Position of an upgrade in its prerequisite chain."""

    PURCHASED = "purchased"
    AVAILABLE = "available"
    LOCKED = "locked"


@dataclass(frozen=True, slots=True)
class EngineSnapshot:
    """Read-only view of the engine, pulled by the presentation layer.

    `entities` holds copies: changing them does not change the engine.
    """

    currency: float
    level: int
    capacity: int
    entities: tuple[GrowableEntity, ...]
    total_yield: float
    global_multiplier: float
    biome: Biome
    purchased_upgrade_ids: frozenset[str]
    purchased_capacity_upgrade_ids: frozenset[str]
    unlocked_achievement_ids: frozenset[str]
