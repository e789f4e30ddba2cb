"""Growable producer models: growth kinds and owned producer instances.

A producer is a tagged record: shared fields plus a `GrowthKind` tag. The
yield formula is a pure function switching on the tag, so adding a new curve
means adding an enum member and a branch in `compute_yield`.

Usage:
    wheat = GrowableEntity(
        id=InstanceId("1"), template_id="p1", display_name="Pixel Wheat",
        kind=GrowthKind.LINEAR, base_yield=1.0, invested_value=10.0,
    )
    wheat.yield_rate(1.0)   # 1.0
    wheat.level_up(5)       # level 2, invested 15
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pixelgarden.core.identity import InstanceId

EXPONENTIAL_BASE = 1.5
"""Per-level growth factor of exponential producers."""


class GrowthKind(Enum):
    """How a producer's yield scales with its level."""

    LINEAR = "linear"
    """baseYield * level * multiplier."""

    EXPONENTIAL = "exponential"
    """baseYield * 1.5^level * multiplier."""


def compute_yield(kind: GrowthKind, base_yield: float, level: int, global_multiplier: float) -> float:
    """Currency per second produced by one producer.

    Args:
        kind: Growth curve of the producer.
        base_yield: Template yield copied at creation.
        level: Current producer level (>= 1).
        global_multiplier: Product of all purchased upgrade multipliers.

    Returns:
        Yield per second.
    """
    if kind is GrowthKind.LINEAR:
        return base_yield * level * global_multiplier
    if kind is GrowthKind.EXPONENTIAL:
        return base_yield * EXPONENTIAL_BASE**level * global_multiplier
    raise ValueError(f"Unknown growth kind: {kind}")


@dataclass(slots=True)
class GrowableEntity:
    """One owned producer instance.

    `id`, `template_id`, `display_name`, `kind` and `base_yield` are fixed at
    creation. `level` and `invested_value` only ever grow, through `level_up`.
    """

    id: InstanceId
    template_id: str
    display_name: str
    kind: GrowthKind
    base_yield: float
    invested_value: float
    level: int = 1

    def yield_rate(self, global_multiplier: float = 1.0) -> float:
        """Currency per second under the given global multiplier."""
        return compute_yield(self.kind, self.base_yield, self.level, global_multiplier)

    def level_up(self, cost: float) -> None:
        """Raise level by one and add `cost` to the invested value.

        Affordability is the caller's concern; nothing is validated here.
        """
        self.level += 1
        self.invested_value += cost
