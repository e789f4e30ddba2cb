"""Static catalog models: immutable templates for producers, upgrades and achievements.

Catalog entries are reference data keyed by ID. The engine never mutates them.
Display text (name, description, lore) is carried along for the presentation
layer but has no effect on the rules.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pixelgarden.core.growth import GrowthKind

AchievementPredicate = Callable[[float, int, int, float], bool]
"""Signature: (currency, level, entity_count, yield_rate) -> unlocked?"""


class Biome(Enum):
    """Tier label derived from player level. Display and unlock gating only."""

    FARM = "FARM"
    DESERT = "DESERT"
    JUNGLE = "JUNGLE"


@dataclass(frozen=True, slots=True)
class ProducerTemplate:
    """Blueprint for a purchasable producer."""

    id: str
    name: str
    kind: GrowthKind
    base_yield: float
    base_cost: float
    unlock_level: int = 1
    description: str = ""
    lore: str = ""


@dataclass(frozen=True, slots=True)
class UpgradeTemplate:
    """Global yield multiplier. Catalog order is the prerequisite chain."""

    id: str
    name: str
    cost: float
    multiplier: float
    description: str = ""
    lore: str = ""


@dataclass(frozen=True, slots=True)
class CapacityUpgradeTemplate:
    """Garden capacity increase. Catalog order is the prerequisite chain."""

    id: str
    name: str
    cost: float
    capacity_increase: int
    description: str = ""


@dataclass(frozen=True, slots=True)
class AchievementTemplate:
    """Achievement unlocked once its predicate first holds."""

    id: str
    name: str
    predicate: AchievementPredicate
    description: str = ""
    icon: str = "trophy"

    def is_met(self, currency: float, level: int, entity_count: int, yield_rate: float) -> bool:
        """Evaluate the predicate against one consistent reading of the game."""
        return bool(self.predicate(currency, level, entity_count, yield_rate))
