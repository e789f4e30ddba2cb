"""Pure economic rules: prices, refunds, player level and biome.

Every function here is a pure function of its arguments so that the rules can
be tested and tuned without building an engine.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from pixelgarden.catalog.models import Biome, UpgradeTemplate

PURCHASE_GROWTH = 1.2
LEVEL_UP_FACTOR = 0.5
SALVAGE_RATE = 0.45
ENTITIES_PER_LEVEL = 3
DESERT_LEVEL = 6
JUNGLE_LEVEL = 11


def purchase_cost(base_cost: float, owned_of_type: int, growth: float = PURCHASE_GROWTH) -> int:
    """Price of the next unit of a producer type.

    Each unit already owned of the same type raises the price by `growth`,
    compounding. Other types do not affect it.
    """
    return math.floor(base_cost * growth**owned_of_type)


def level_up_cost(base_cost: float, level: int, factor: float = LEVEL_UP_FACTOR) -> int:
    """Price of raising a producer from `level` to `level + 1`."""
    return math.floor(base_cost * factor * level)


def sell_value(invested_value: float, salvage_rate: float = SALVAGE_RATE) -> int:
    """Refund for selling a producer: a fixed share of everything spent on it."""
    return math.floor(invested_value * salvage_rate)


def level_for_entity_count(entity_count: int, per_level: int = ENTITIES_PER_LEVEL) -> int:
    """Player level implied by owning `entity_count` producers."""
    return 1 + entity_count // per_level


def biome_for_level(level: int) -> Biome:
    if level >= JUNGLE_LEVEL:
        return Biome.JUNGLE
    if level >= DESERT_LEVEL:
        return Biome.DESERT
    return Biome.FARM


def stacked_multiplier(upgrades: Iterable[UpgradeTemplate]) -> float:
    """Product of upgrade multipliers (1.0 for none). Multiplicative, not additive."""
    multiplier = 1.0
    for upgrade in upgrades:
        multiplier *= upgrade.multiplier
    return multiplier
